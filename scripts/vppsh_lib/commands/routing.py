"""
Static route commands.
"""

from vppsh_lib.common import log, reply_failed
from vppsh_lib.parsers import RouteRequest
from .context import CommandContext, CommandError


def route_request(ctx: CommandContext) -> RouteRequest:
    """Build and validate a RouteRequest from network/mask/gateway parameters."""
    request = RouteRequest(
        network=ctx.require("network"),
        gateway=ctx.require("gateway"),
        mask=ctx.param("mask"),
    )
    try:
        request.validate()
    except ValueError as e:
        raise CommandError(f"Invalid route: {e}")
    return request


def _route_command(ctx: CommandContext, action: str) -> RouteRequest:
    request = route_request(ctx)
    reply = ctx.query(f"ip route {action} {request.destination} via {request.gateway}")
    if reply_failed(reply):
        raise CommandError(reply.strip())
    if reply.strip():
        print(reply.rstrip("\n"))
    return request


def cmd_add_ip_route(ctx: CommandContext) -> None:
    """ip route <network> [<mask>] <gateway>"""
    request = _route_command(ctx, "add")
    log(f"Route added: {request.destination} via {request.gateway}")


def cmd_del_ip_route(ctx: CommandContext) -> None:
    """no ip route <network> [<mask>] <gateway>"""
    request = _route_command(ctx, "del")
    log(f"Route deleted: {request.destination} via {request.gateway}")
