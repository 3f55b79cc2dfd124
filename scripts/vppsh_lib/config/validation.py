"""
Argument checks for router-style commands.

Besides plain address validation this converts dotted netmasks to prefix
lengths (any contiguous mask, not just the common ones) and recognises the
interface names vppsh creates on demand: loopbacks ("loop5") and VLAN
sub-interfaces ("GigabitEthernet0/8/0.100").
"""

import ipaddress
import re
from typing import Optional

LOOPBACK_RE = re.compile(r'^loop(\d+)$')
SUBINTERFACE_RE = re.compile(r'^(\S+)\.(\d+)$')


def validate_ipv4(ip: str) -> bool:
    """Validate an IPv4 address."""
    try:
        ipaddress.IPv4Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def validate_ipv6(ip: str) -> bool:
    """Validate an IPv6 address."""
    try:
        ipaddress.IPv6Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def validate_ipv4_cidr(cidr: str) -> bool:
    """Validate an IPv4 CIDR notation."""
    try:
        ipaddress.IPv4Network(cidr, strict=False)
        return True
    except (ipaddress.AddressValueError, ipaddress.NetmaskValueError, ValueError):
        return False


def validate_ipv6_cidr(cidr: str) -> bool:
    """Validate an IPv6 CIDR notation."""
    try:
        ipaddress.IPv6Network(cidr, strict=False)
        return True
    except (ipaddress.AddressValueError, ipaddress.NetmaskValueError, ValueError):
        return False


def netmask_to_prefix(mask: str) -> int:
    """
    Convert a dotted IPv4 netmask (or a bare prefix length) to a prefix length.

    Args:
        mask: "255.255.255.0", "24" or "/24"

    Returns:
        Prefix length (0-32)

    Raises:
        ValueError: If the mask is not a contiguous IPv4 netmask
    """
    mask = mask.strip().lstrip("/")
    if mask.isdigit():
        prefix = int(mask)
        if 0 <= prefix <= 32:
            return prefix
        raise ValueError(f"Invalid prefix length: {mask}")
    try:
        bits = int(ipaddress.IPv4Address(mask))
    except ipaddress.AddressValueError:
        raise ValueError(f"Invalid netmask: {mask}")
    # Host bits must be a run of trailing ones (0.0.0.255 is a wildcard, not a mask)
    host_bits = ~bits & 0xFFFFFFFF
    if host_bits & (host_bits + 1):
        raise ValueError(f"Invalid netmask: {mask}")
    return 32 - host_bits.bit_length()


def loopback_instance(name: str) -> Optional[int]:
    """Return the instance number of a loopN name, or None."""
    match = LOOPBACK_RE.match(name)
    if match:
        return int(match.group(1))
    return None


def split_subinterface(name: str) -> Optional[tuple[str, int]]:
    """
    Split a "parent.vlan" sub-interface name.

    Returns:
        (parent, vlan_id) when vlan_id is in 1..4095, otherwise None
    """
    match = SUBINTERFACE_RE.match(name)
    if not match:
        return None
    vlan_id = int(match.group(2))
    if 0 < vlan_id < 4096:
        return match.group(1), vlan_id
    return None
