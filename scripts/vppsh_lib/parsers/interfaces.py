"""
Interface report parsers.

VPP reports interface state and interface addresses in two unrelated
reports. 'show interface' is a table:

              Name               Idx    State  MTU (L3/IP4/IP6/MPLS)     Counter          Count
    GigabitEthernet0/8/0          1      up          1500/0/0/0     rx packets                    12
                                                                    rx bytes                    1048
    local0                        0     down          0/0/0/0

'show interface addr' groups addresses under one header per interface:

    GigabitEthernet0/8/0 (up):
      L3 10.0.0.1/24
    local0 (dn):

Both parsers skip lines they do not recognise, and merge_interfaces()
joins their output by interface name.
"""

import re
from typing import Callable, Optional

from vppsh_lib.config import DEFAULT_MTU, MAX_ADDRESSES
from .dataclasses import InterfaceRecord

ADDRESS_HEADER_RE = re.compile(r'^(\S+)\s+\(([^)]*)\):?\s*$')

INTERFACE_TABLE_COMMAND = "show interface"
INTERFACE_ADDR_COMMAND = "show interface addr"


def _is_table_header(tokens: list[str]) -> bool:
    return "Name" in tokens and "Idx" in tokens


def _parse_mtu(token: str) -> int:
    first = token.split("/", 1)[0]
    if first.isdigit():
        return int(first)
    return DEFAULT_MTU


def parse_interface_table(text: str) -> list[InterfaceRecord]:
    """
    Parse 'show interface' output.

    Args:
        text: Filtered report text

    Returns:
        One record per top-level interface line, in report order. Addresses
        are left empty.
    """
    records = []
    seen = set()

    for line in text.splitlines():
        if not line.strip() or line[0].isspace():
            continue  # Blank line or per-interface counter line

        tokens = line.split()
        if _is_table_header(tokens) or len(tokens) < 3:
            continue
        if not tokens[1].isdigit():
            continue

        name = tokens[0]
        if name in seen:
            continue
        seen.add(name)

        mtu = _parse_mtu(tokens[3]) if len(tokens) > 3 else DEFAULT_MTU
        records.append(InterfaceRecord(
            name=name,
            admin_up="up" in tokens[2],
            mtu=mtu,
        ))

    return records


def parse_interface_addresses(text: str, max_addresses: int = MAX_ADDRESSES) -> dict:
    """
    Parse 'show interface addr' output.

    Args:
        text: Filtered report text
        max_addresses: Per-interface cap; extra addresses are dropped and the
            interface is flagged as truncated

    Returns:
        Dict of interface name -> InterfaceRecord (insertion order is report
        order). Only name, admin_up, addresses and truncated are meaningful.
    """
    groups: dict[str, InterfaceRecord] = {}
    current: Optional[InterfaceRecord] = None

    for line in text.splitlines():
        if not line.strip():
            continue

        if not line[0].isspace():
            if "(" not in line:
                continue
            match = ADDRESS_HEADER_RE.match(line)
            if not match:
                current = None  # Following L3 lines belong to nothing we know
                continue
            name = match.group(1)
            current = groups.get(name)
            if current is None:
                current = InterfaceRecord(name=name, admin_up="up" in match.group(2))
                groups[name] = current
            continue

        if current is None or "L3 " not in line:
            continue

        tokens = line.split("L3 ", 1)[1].split()
        if not tokens:
            continue
        if len(current.addresses) >= max_addresses:
            current.truncated = True
            continue
        current.addresses.append(tokens[0])

    return groups


def merge_interfaces(table: list[InterfaceRecord], addresses: dict) -> list[InterfaceRecord]:
    """
    Merge table records with address groups by interface name.

    Interfaces from the table keep table order and table state/MTU.
    Interfaces that only appear in the address report follow in address
    report order with the default MTU.
    """
    merged = []
    names = set()

    for record in table:
        group = addresses.get(record.name)
        merged.append(InterfaceRecord(
            name=record.name,
            admin_up=record.admin_up,
            mtu=record.mtu,
            addresses=list(group.addresses) if group else [],
            truncated=group.truncated if group else False,
        ))
        names.add(record.name)

    for name, group in addresses.items():
        if name in names:
            continue
        merged.append(InterfaceRecord(
            name=name,
            admin_up=group.admin_up,
            mtu=DEFAULT_MTU,
            addresses=list(group.addresses),
            truncated=group.truncated,
        ))

    return merged


def collect_interfaces(exec_fn: Callable[[str], str],
                       max_addresses: int = MAX_ADDRESSES) -> list[InterfaceRecord]:
    """
    Query both interface reports and merge them.

    Args:
        exec_fn: Function that runs one VPP command and returns its reply
        max_addresses: Per-interface address cap
    """
    table = parse_interface_table(exec_fn(INTERFACE_TABLE_COMMAND))
    groups = parse_interface_addresses(exec_fn(INTERFACE_ADDR_COMMAND), max_addresses)
    return merge_interfaces(table, groups)
