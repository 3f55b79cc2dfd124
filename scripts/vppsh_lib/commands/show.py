"""
Show commands.

Operational views of live VPP state: interface tables, routes, the
regenerated running configuration and raw VPP reports.
"""

from vppsh_lib.common import Colors, info, paint
from vppsh_lib.display import (
    render_interface_table,
    render_ip_brief,
    render_route_table,
    render_running_config,
)
from vppsh_lib.parsers import (
    collect_interfaces,
    parse_bond_details,
    parse_lcp_pairs,
    parse_fib_routes,
)
from .context import CommandContext


def gather_interfaces(ctx: CommandContext) -> list:
    """Query both interface reports and merge them."""
    return collect_interfaces(ctx.query, ctx.settings.max_addresses)


def gather_config_state(ctx: CommandContext) -> tuple:
    """Collect everything the configuration script is built from."""
    records = gather_interfaces(ctx)
    bonds = parse_bond_details(ctx.query("show bond details"))
    lcp_pairs = parse_lcp_pairs(ctx.query("show lcp"))
    return records, bonds, lcp_pairs


def print_reply(reply: str) -> None:
    if reply.strip():
        print(reply.rstrip("\n"))


def cmd_show_interfaces(ctx: CommandContext) -> None:
    """Interface table with addresses, MTU and state."""
    print(render_interface_table(gather_interfaces(ctx)), end="")


def cmd_show_interface_detail(ctx: CommandContext) -> None:
    """Raw 'show interface addr' report."""
    print_reply(ctx.vpp("show interface addr"))


def cmd_show_ip_interface_brief(ctx: CommandContext) -> None:
    print(render_ip_brief(gather_interfaces(ctx)), end="")


def cmd_show_running_config(ctx: CommandContext) -> None:
    """Configuration script regenerated from live state."""
    records, bonds, lcp_pairs = gather_config_state(ctx)
    print("Building configuration...")
    print()
    print("Current configuration:")
    print(render_running_config(records, bonds, lcp_pairs), end="")
    print("end")


def cmd_show_ip_route(ctx: CommandContext) -> None:
    print(render_route_table(parse_fib_routes(ctx.query("show ip fib"))), end="")


def cmd_show_version(ctx: CommandContext) -> None:
    print_reply(ctx.vpp("show version"))


def cmd_show_hardware(ctx: CommandContext) -> None:
    print_reply(ctx.vpp("show hardware-interfaces"))


def cmd_show_current_interface(ctx: CommandContext) -> None:
    """Report which interface this session is configuring."""
    name = ctx.store.get_current(ctx.session_key)
    if name:
        print(f"Current interface: {paint(Colors.BOLD, name)}")
    else:
        info("Not in interface configuration mode")
