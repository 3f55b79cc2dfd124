"""
vppsh_lib.parsers - Parsers for VPP text reports

This package contains:
- dataclasses: Record types (InterfaceRecord, RouteRequest, RouteEntry, etc.)
- interfaces: 'show interface' / 'show interface addr' parsers and merge
- records: Route, bond and linux-cp report parsers
"""

from .dataclasses import (
    InterfaceRecord,
    RouteRequest,
    RouteEntry,
    BondRecord,
    LcpPair,
)

from .interfaces import (
    parse_interface_table,
    parse_interface_addresses,
    merge_interfaces,
    collect_interfaces,
)

from .records import (
    parse_lcp_pairs,
    parse_bond_details,
    parse_fib_routes,
)

__all__ = [
    # Records
    'InterfaceRecord',
    'RouteRequest',
    'RouteEntry',
    'BondRecord',
    'LcpPair',
    # Interface reports
    'parse_interface_table',
    'parse_interface_addresses',
    'merge_interfaces',
    'collect_interfaces',
    # Other reports
    'parse_lcp_pairs',
    'parse_bond_details',
    'parse_fib_routes',
]
