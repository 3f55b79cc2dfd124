"""
Configuration script rendering.

Rebuilds a replayable configuration script from live VPP state. Sections
are emitted in dependency order: loopbacks, bonds, VLAN sub-interfaces,
per-interface blocks, then linux-cp pairings.
"""

import ipaddress
from datetime import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from vppsh_lib import __version__
from vppsh_lib.config import (
    DEFAULT_MTU,
    TEMPLATE_DIR,
    loopback_instance,
    split_subinterface,
)
from vppsh_lib.parsers import InterfaceRecord, BondRecord, LcpPair

# Never written as interface blocks
EXCLUDED_INTERFACES = ("local0",)


def get_environment(template_dir: Path = TEMPLATE_DIR) -> Environment:
    """Create the Jinja2 environment used for configuration scripts."""
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True
    )


def address_line(cidr: str) -> Optional[str]:
    """Turn an interface CIDR into an 'ip address' / 'ipv6 address' line."""
    try:
        iface = ipaddress.ip_interface(cidr)
    except ValueError:
        return None
    if iface.version == 4:
        return f"ip address {iface.ip} {iface.network.netmask}"
    return f"ipv6 address {iface.with_prefixlen}"


def bond_commands(bond: BondRecord) -> list[str]:
    """VPP commands that recreate a bond and attach its members."""
    command = f"create bond mode {bond.mode or 'lacp'}"
    if bond.load_balance:
        command += f" load-balance {bond.load_balance}"
    if bond.instance is not None:
        command += f" instance {bond.instance}"
    return [command] + [f"bond add {bond.name} {member}" for member in bond.members]


def build_config_context(records: list[InterfaceRecord],
                         bonds: list[BondRecord],
                         lcp_pairs: list[LcpPair]) -> dict:
    """
    Build the template context for a configuration script.

    Args:
        records: Merged interface records
        bonds: Parsed 'show bond details' records
        lcp_pairs: Parsed 'show lcp' pairings

    Returns:
        Dict with loopbacks, bonds, subinterfaces, interfaces and lcp_pairs
    """
    host_taps = {pair.host_tap for pair in lcp_pairs}

    loopbacks = []
    subinterfaces = []
    interfaces = []

    for record in records:
        instance = loopback_instance(record.name)
        if instance is not None:
            loopbacks.append(f"create loopback interface instance {instance}")

        sub = split_subinterface(record.name)
        if sub:
            parent, vlan_id = sub
            subinterfaces.append(f"create sub-interfaces {parent} {vlan_id}")

        if record.name in EXCLUDED_INTERFACES or record.name in host_taps:
            continue

        address_lines = [line for line in map(address_line, record.addresses) if line]
        interfaces.append({
            'name': record.name,
            'mtu': record.mtu if record.mtu != DEFAULT_MTU else None,
            'address_lines': address_lines,
            'shutdown': not record.admin_up,
        })

    bond_lines = []
    for bond in bonds:
        bond_lines.extend(bond_commands(bond))

    return {
        'loopbacks': loopbacks,
        'bonds': bond_lines,
        'subinterfaces': subinterfaces,
        'interfaces': interfaces,
        'lcp_pairs': [f"lcp create {p.phy} host-if {p.host_if}" for p in lcp_pairs],
    }


def render_running_config(records: list[InterfaceRecord],
                          bonds: list[BondRecord],
                          lcp_pairs: list[LcpPair],
                          template_dir: Path = TEMPLATE_DIR) -> str:
    """Render the configuration script body."""
    env = get_environment(template_dir)
    context = build_config_context(records, bonds, lcp_pairs)
    return env.get_template("running-config.j2").render(**context)


def render_startup_config(records: list[InterfaceRecord],
                          bonds: list[BondRecord],
                          lcp_pairs: list[LcpPair],
                          template_dir: Path = TEMPLATE_DIR,
                          generated: Optional[datetime] = None) -> str:
    """Render the configuration script with the startup-config header."""
    env = get_environment(template_dir)
    context = build_config_context(records, bonds, lcp_pairs)
    generated = generated or datetime.now()
    return env.get_template("startup-config.j2").render(
        generated=generated.strftime("%Y-%m-%d %H:%M:%S"),
        version=__version__,
        **context
    )
