"""
Interface configuration commands.

'interface <name>' puts the session into interface configuration mode;
the other commands here act on the session's current interface unless an
explicit interface parameter is given.
"""

from vppsh_lib.common import log, reply_failed
from vppsh_lib.config import (
    netmask_to_prefix,
    validate_ipv4,
    validate_ipv4_cidr,
    validate_ipv6_cidr,
)
from vppsh_lib.session import InterfaceEntryError, enter_interface
from .context import CommandContext, CommandError

MTU_RANGE = (64, 9216)


def _run_config(ctx: CommandContext, command: str) -> str:
    """Run a configuration command; a rejected command raises CommandError."""
    reply = ctx.query(command)
    if reply_failed(reply):
        raise CommandError(reply.strip())
    return reply


def interface_cidr(address: str, mask: str = None) -> str:
    """
    Build the CIDR for an address command.

    Args:
        address: IPv4 address, or an IPv4/IPv6 address already in CIDR form
        mask: Dotted netmask or prefix length (required for a bare IPv4 address)

    Raises:
        CommandError: On a malformed address or mask
    """
    if "/" in address:
        if validate_ipv4_cidr(address) or validate_ipv6_cidr(address):
            return address
        raise CommandError(f"Invalid address: {address}")

    if not validate_ipv4(address):
        raise CommandError(f"Invalid IPv4 address: {address}")
    if not mask:
        raise CommandError("Missing parameter: mask")
    try:
        prefix = netmask_to_prefix(mask)
    except ValueError as e:
        raise CommandError(str(e))
    return f"{address}/{prefix}"


def cmd_interface(ctx: CommandContext) -> None:
    """Enter interface configuration mode, creating loopbacks and VLAN sub-interfaces."""
    name = ctx.require("interface")
    try:
        enter_interface(name, ctx.store, ctx.session_key, ctx.vpp)
    except InterfaceEntryError as e:
        raise CommandError(str(e))


def cmd_exit_interface(ctx: CommandContext) -> None:
    """Leave interface configuration mode."""
    ctx.store.clear_current(ctx.session_key)


def cmd_config_interface_ip(ctx: CommandContext) -> None:
    """ip address <address> <mask>"""
    iface = ctx.current_interface()
    cidr = interface_cidr(ctx.require("address"), ctx.param("mask"))

    _run_config(ctx, f"set interface ip address {iface} {cidr}")
    log(f"IP address {cidr} configured on {iface}")


def cmd_no_ip_address(ctx: CommandContext) -> None:
    """no ip address [<address> <mask>]"""
    iface = ctx.current_interface()
    address = ctx.param("address")

    if address:
        cidr = interface_cidr(address, ctx.param("mask"))
        _run_config(ctx, f"set interface ip address del {iface} {cidr}")
        log(f"IP address {cidr} removed from {iface}")
    else:
        _run_config(ctx, f"set interface ip address del {iface} all")
        log(f"All IP addresses removed from {iface}")


def cmd_interface_up(ctx: CommandContext) -> None:
    """no shutdown"""
    iface = ctx.current_interface()
    _run_config(ctx, f"set interface state {iface} up")
    log(f"Interface {iface} is now up")


def cmd_interface_down(ctx: CommandContext) -> None:
    """shutdown"""
    iface = ctx.current_interface()
    _run_config(ctx, f"set interface state {iface} down")
    log(f"Interface {iface} is now administratively down")


def cmd_interface_mtu(ctx: CommandContext) -> None:
    """mtu <bytes>"""
    iface = ctx.current_interface()
    value = ctx.require("mtu")
    if not value.isdigit() or not MTU_RANGE[0] <= int(value) <= MTU_RANGE[1]:
        raise CommandError(f"MTU must be between {MTU_RANGE[0]} and {MTU_RANGE[1]}")

    _run_config(ctx, f"set interface mtu packet {value} {iface}")
    log(f"MTU {value} configured on {iface}")
