"""
System commands: interface creation, ping and saving the configuration.
"""

from vppsh_lib.common import log, atomic_write_text
from vppsh_lib.config import validate_ipv4, validate_ipv6
from vppsh_lib.display import render_startup_config
from .context import CommandContext, CommandError
from .show import gather_config_state, print_reply

PING_REPEAT = 5


def cmd_create_loopback(ctx: CommandContext) -> None:
    """Create a loopback, optionally with a fixed instance number."""
    instance = ctx.param("instance")
    if instance is not None and not instance.isdigit():
        raise CommandError(f"Invalid loopback instance: {instance}")

    command = "create loopback interface"
    if instance is not None:
        command += f" instance {instance}"
    print_reply(ctx.vpp(command))


def cmd_create_tap(ctx: CommandContext) -> None:
    """Create a tap interface, optionally naming the host side."""
    name = ctx.param("name")
    if name:
        command = f"create tap id 0 host-if-name {name}"
    else:
        command = "create tap id 0"
    print_reply(ctx.vpp(command))


def cmd_ping(ctx: CommandContext) -> None:
    target = ctx.require("target")
    if not (validate_ipv4(target) or validate_ipv6(target)):
        raise CommandError(f"Invalid target address: {target}")
    print_reply(ctx.vpp(f"ping {target} repeat {PING_REPEAT}"))


def cmd_write_memory(ctx: CommandContext) -> None:
    """Save the regenerated configuration script to the startup config file."""
    print("Building configuration...")
    records, bonds, lcp_pairs = gather_config_state(ctx)
    text = render_startup_config(records, bonds, lcp_pairs)

    path = ctx.settings.startup_config
    try:
        atomic_write_text(path, text)
    except OSError as e:
        raise CommandError(f"Cannot write {path}: {e.strerror or e}")

    print("[OK]")
    log(f"Configuration saved to {path}")
