"""
Command dispatch table for vppsh.

The host shell refers to commands by name (e.g., "show_interfaces",
"config_interface_ip"). COMMANDS maps each name to its handler and to the
names of the parameters that positional arguments fill, in order.
"""

from typing import Callable, NamedTuple

from vppsh_lib.common import Colors, error, paint, warn
from vppsh_lib.session import SessionError
from vppsh_lib.commands import (
    CommandContext,
    CommandError,
    cmd_show_interfaces,
    cmd_show_interface_detail,
    cmd_show_ip_interface_brief,
    cmd_show_running_config,
    cmd_show_ip_route,
    cmd_show_version,
    cmd_show_hardware,
    cmd_show_current_interface,
    cmd_interface,
    cmd_exit_interface,
    cmd_config_interface_ip,
    cmd_no_ip_address,
    cmd_interface_up,
    cmd_interface_down,
    cmd_interface_mtu,
    cmd_add_ip_route,
    cmd_del_ip_route,
    cmd_create_loopback,
    cmd_create_tap,
    cmd_ping,
    cmd_write_memory,
)

# Exit statuses
OK = 0
FAILED = 1
UNKNOWN = 2


class Command(NamedTuple):
    handler: Callable[[CommandContext], None]
    params: tuple = ()
    summary: str = ""


def cmd_help(ctx: CommandContext) -> None:
    """List available commands."""
    print()
    print(paint(Colors.BOLD, "Available Commands:"))
    print()
    for name in sorted(COMMANDS):
        command = COMMANDS[name]
        params = " ".join(f"<{p}>" for p in command.params)
        print(f"  {name} {params}".rstrip())
        if command.summary:
            print(f"      {command.summary}")
    print()


COMMANDS = {
    # Show
    "show_interfaces": Command(cmd_show_interfaces, (), "Interface table (address, MTU, state)"),
    "show_interface_detail": Command(cmd_show_interface_detail, (), "Raw interface address report"),
    "show_ip_interface_brief": Command(cmd_show_ip_interface_brief, (), "One line per interface"),
    "show_running_config": Command(cmd_show_running_config, (), "Configuration regenerated from VPP"),
    "show_ip_route": Command(cmd_show_ip_route, (), "IPv4 forwarding table"),
    "show_version": Command(cmd_show_version, (), "VPP version"),
    "show_hardware": Command(cmd_show_hardware, (), "Hardware interface details"),
    "show_current_interface": Command(cmd_show_current_interface, (), "Interface being configured"),
    # Interface configuration mode
    "interface": Command(cmd_interface, ("interface",), "Enter interface configuration mode"),
    "exit_interface": Command(cmd_exit_interface, (), "Leave interface configuration mode"),
    "config_interface_ip": Command(cmd_config_interface_ip, ("address", "mask"), "ip address"),
    "no_ip_address": Command(cmd_no_ip_address, ("address", "mask"), "no ip address"),
    "interface_up": Command(cmd_interface_up, (), "no shutdown"),
    "interface_down": Command(cmd_interface_down, (), "shutdown"),
    "interface_mtu": Command(cmd_interface_mtu, ("mtu",), "mtu"),
    # Creation
    "create_loopback": Command(cmd_create_loopback, ("instance",), "Create a loopback interface"),
    "create_tap": Command(cmd_create_tap, ("name",), "Create a tap interface"),
    # Routing
    "add_ip_route": Command(cmd_add_ip_route, ("network", "mask", "gateway"), "ip route"),
    "del_ip_route": Command(cmd_del_ip_route, ("network", "mask", "gateway"), "no ip route"),
    # System
    "ping": Command(cmd_ping, ("target",), "Ping from VPP"),
    "write_memory": Command(cmd_write_memory, (), "Save configuration"),
    "help": Command(cmd_help, (), "Show this help"),
}


def bind_positional(command: Command, ctx: CommandContext) -> None:
    """
    Fill unset parameters from positional arguments, in declared order.

    Parameters already given as name=value are skipped. Route commands
    accept "<network> <gateway>" as well as "<network> <mask> <gateway>".
    """
    names = [name for name in command.params if name not in ctx.params]
    args = list(ctx.args)
    if "mask" in names and "gateway" in names and len(args) == len(names) - 1:
        names.remove("mask")
    for name, value in zip(names, args):
        ctx.params.setdefault(name, value)


def dispatch(name: str, ctx: CommandContext) -> int:
    """
    Run one command.

    Returns:
        OK on success, FAILED when the handler reported an error, UNKNOWN for
        an unknown command name
    """
    command = COMMANDS.get(name.replace("-", "_"))
    if command is None:
        warn(f"Unknown command: {name}")
        print("Type 'help' for available commands")
        return UNKNOWN

    bind_positional(command, ctx)
    try:
        command.handler(ctx)
    except (CommandError, SessionError) as e:
        error(str(e))
        return FAILED
    return OK
