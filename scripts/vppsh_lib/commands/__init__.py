"""
vppsh_lib.commands - Command handlers for vppsh

This package contains command handler functions organized by feature area:
- context: CommandContext, CommandError and parameter parsing
- show: Interface, route, version and running-config views
- interface: Interface configuration mode and per-interface settings
- routing: Static routes
- system: Interface creation, ping and write memory
"""

from .context import CommandContext, CommandError, parse_params

# Show operations
from .show import (
    cmd_show_interfaces,
    cmd_show_interface_detail,
    cmd_show_ip_interface_brief,
    cmd_show_running_config,
    cmd_show_ip_route,
    cmd_show_version,
    cmd_show_hardware,
    cmd_show_current_interface,
)

# Interface operations
from .interface import (
    cmd_interface,
    cmd_exit_interface,
    cmd_config_interface_ip,
    cmd_no_ip_address,
    cmd_interface_up,
    cmd_interface_down,
    cmd_interface_mtu,
)

# Routing operations
from .routing import (
    cmd_add_ip_route,
    cmd_del_ip_route,
)

# System operations
from .system import (
    cmd_create_loopback,
    cmd_create_tap,
    cmd_ping,
    cmd_write_memory,
)

__all__ = [
    'CommandContext', 'CommandError', 'parse_params',
    # Show
    'cmd_show_interfaces', 'cmd_show_interface_detail', 'cmd_show_ip_interface_brief',
    'cmd_show_running_config', 'cmd_show_ip_route', 'cmd_show_version',
    'cmd_show_hardware', 'cmd_show_current_interface',
    # Interface
    'cmd_interface', 'cmd_exit_interface', 'cmd_config_interface_ip',
    'cmd_no_ip_address', 'cmd_interface_up', 'cmd_interface_down', 'cmd_interface_mtu',
    # Routing
    'cmd_add_ip_route', 'cmd_del_ip_route',
    # System
    'cmd_create_loopback', 'cmd_create_tap', 'cmd_ping', 'cmd_write_memory',
]
