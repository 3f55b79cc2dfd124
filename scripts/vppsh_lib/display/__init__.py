"""
vppsh_lib.display - Display functions for parsed VPP state

This package contains:
- tables: Fixed-width 'show' tables for interfaces and routes
- config: Configuration script rendering (running/startup config)
"""

from .tables import (
    UNASSIGNED,
    format_row,
    render_interface_table,
    render_ip_brief,
    render_route_table,
)

from .config import (
    get_environment,
    address_line,
    bond_commands,
    build_config_context,
    render_running_config,
    render_startup_config,
)

__all__ = [
    # Tables
    'UNASSIGNED',
    'format_row',
    'render_interface_table',
    'render_ip_brief',
    'render_route_table',
    # Config scripts
    'get_environment',
    'address_line',
    'bond_commands',
    'build_config_context',
    'render_running_config',
    'render_startup_config',
]
