"""
Parsers for route, bond and linux-cp reports.

These scan loosely structured lines for a fixed token layout and skip any
line that does not fit it.
"""

import re

from .dataclasses import RouteEntry, BondRecord, LcpPair

LCP_PAIR_RE = re.compile(r'^\s*itf-pair:\s*\[(\d+)\]\s+(\S+)\s+(\S+)\s+(\S+)')

FIB_PREFIX_RE = re.compile(r'^(\d+\.\d+\.\d+\.\d+/\d+)(?:\s|$)')
FIB_VIA_RE = re.compile(r'\bvia\s+(\S+)\s+(\S+?):?(?:\s|$)')
FIB_GLEAN_RE = re.compile(r'glean:.*?\]\s+(\S+?):')
FIB_RECEIVE_RE = re.compile(r'dpo-receive:\s+(\S+)\s+on\s+(\S+)')


def parse_lcp_pairs(text: str) -> list[LcpPair]:
    """
    Parse 'show lcp' output.

        itf-pair: [0] GigabitEthernet0/8/0 tap1 eth0 1 type tap netns dataplane
    """
    pairs = []
    for line in text.splitlines():
        match = LCP_PAIR_RE.match(line)
        if not match:
            continue
        pairs.append(LcpPair(
            index=int(match.group(1)),
            phy=match.group(2),
            host_tap=match.group(3),
            host_if=match.group(4),
        ))
    return pairs


def parse_bond_details(text: str) -> list[BondRecord]:
    """
    Parse 'show bond details' output.

        BondEthernet0
          mode: lacp
          load balance: l2
          number of members: 2
            GigabitEthernet0/8/0
            GigabitEthernet0/9/0
          device instance: 0

    Older VPP releases say "slaves" where newer ones say "members".
    """
    bonds = []
    current = None
    in_members = False

    for line in text.splitlines():
        if not line.strip():
            continue

        if not line[0].isspace():
            tokens = line.split()
            if len(tokens) == 1 and not tokens[0].endswith(":"):
                current = BondRecord(name=tokens[0])
                bonds.append(current)
            else:
                current = None
            in_members = False
            continue

        if current is None:
            continue

        stripped = line.strip()
        if ":" in stripped:
            key, _, value = stripped.partition(":")
            key = key.strip()
            value = value.strip()
            in_members = key in ("number of members", "number of slaves")
            if key == "mode":
                current.mode = value
            elif key == "load balance":
                current.load_balance = value
        elif in_members and len(stripped.split()) == 1:
            current.members.append(stripped)

    return bonds


def parse_fib_routes(text: str) -> list[RouteEntry]:
    """
    Parse 'show ip fib' output.

    Each entry starts with an unindented prefix line; the first indented
    forwarding line that names a next hop (via/glean/receive/drop) decides
    the entry's gateway and interface.
    """
    routes = []
    current = None

    for line in text.splitlines():
        match = FIB_PREFIX_RE.match(line)
        if match:
            current = RouteEntry(prefix=match.group(1))
            routes.append(current)
            continue

        if current is None or not line[:1].isspace() or current.kind != "other":
            continue

        via = FIB_VIA_RE.search(line)
        if via:
            current.kind = "via"
            current.next_hop = via.group(1)
            current.interface = via.group(2)
            continue

        glean = FIB_GLEAN_RE.search(line)
        if glean:
            current.kind = "glean"
            current.interface = glean.group(1)
            continue

        receive = FIB_RECEIVE_RE.search(line)
        if receive:
            current.kind = "receive"
            current.interface = receive.group(2)
            continue

        if "dpo-drop" in line:
            current.kind = "drop"

    return routes
