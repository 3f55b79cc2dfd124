"""
Record types produced by the report parsers.

Records are rebuilt from VPP reports on every command and never persisted.
"""

import ipaddress
import re
from dataclasses import dataclass, field
from typing import Optional

from vppsh_lib.config import DEFAULT_MTU, netmask_to_prefix

BOND_NAME_RE = re.compile(r'^BondEthernet(\d+)$')

# Prefix used when a route is given without a mask
DEFAULT_ROUTE_PREFIX = 24


@dataclass
class InterfaceRecord:
    """One interface merged from 'show interface' and 'show interface addr'."""
    name: str
    admin_up: bool = False
    mtu: int = DEFAULT_MTU
    addresses: list[str] = field(default_factory=list)  # CIDR strings, report order
    truncated: bool = False  # Addresses beyond the per-interface cap were dropped

    @property
    def status(self) -> str:
        return "up" if self.admin_up else "down"


@dataclass
class RouteRequest:
    """A static route built from command parameters."""
    network: str
    gateway: str
    mask: Optional[str] = None

    @property
    def prefix(self) -> int:
        """Prefix length from the CIDR network, the mask, or the /24 default."""
        if "/" in self.network:
            return int(self.network.rsplit("/", 1)[1])
        if self.mask:
            return netmask_to_prefix(self.mask)
        return DEFAULT_ROUTE_PREFIX

    @property
    def destination(self) -> str:
        """Destination in CIDR form (host bits kept as given)."""
        address = self.network.rsplit("/", 1)[0]
        return f"{address}/{self.prefix}"

    def validate(self) -> None:
        """Raise ValueError if the network, mask or gateway is malformed."""
        if "/" in self.network and self.mask:
            raise ValueError(f"mask {self.mask} given with CIDR network {self.network}")
        ipaddress.ip_network(self.destination, strict=False)
        ipaddress.ip_address(self.gateway)


@dataclass
class RouteEntry:
    """One FIB entry from 'show ip fib'."""
    prefix: str
    next_hop: str = ""
    interface: str = ""
    kind: str = "other"  # via, glean, receive, drop, other


@dataclass
class BondRecord:
    """A bond interface and its member links from 'show bond details'."""
    name: str
    mode: str = ""
    load_balance: str = ""
    members: list[str] = field(default_factory=list)

    @property
    def instance(self) -> Optional[int]:
        match = BOND_NAME_RE.match(self.name)
        return int(match.group(1)) if match else None


@dataclass
class LcpPair:
    """A linux-cp interface pairing from 'show lcp'."""
    index: int
    phy: str        # VPP interface
    host_tap: str   # VPP side of the tap
    host_if: str    # Linux interface name
