"""
Command context for vppsh handlers.

A CommandContext carries everything one command invocation needs: its
parameters, the session identity and store, the settings, and the function
used to talk to VPP.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from vppsh_lib.common.vpp import vpp_exec, channel_error
from vppsh_lib.config import Settings
from vppsh_lib.session import SessionStore


class CommandError(Exception):
    """A command could not run: missing parameter, context or bad argument."""
    pass


def parse_params(tokens: list[str]) -> tuple[dict, list[str]]:
    """
    Split command tokens into named parameters and positional arguments.

    "name=value" tokens become parameters (a repeated name keeps the last
    value); every other token is positional.
    """
    params = {}
    args = []
    for token in tokens:
        name, sep, value = token.partition("=")
        if sep and name:
            params[name] = value
        else:
            args.append(token)
    return params, args


@dataclass
class CommandContext:
    """State for one command invocation."""
    session_key: str
    store: SessionStore
    settings: Settings = field(default_factory=Settings)
    params: dict = field(default_factory=dict)
    args: list[str] = field(default_factory=list)
    executor: Optional[Callable[[str], str]] = None  # Defaults to vpp_exec

    def vpp(self, command: str) -> str:
        """Send one command to VPP and return the reply text."""
        if self.executor is not None:
            return self.executor(command)
        return vpp_exec(command, self.settings)

    def query(self, command: str) -> str:
        """Like vpp(), but a channel failure aborts the command."""
        reply = self.vpp(command)
        if channel_error(reply):
            raise CommandError(reply.strip())
        return reply

    def param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self.params.get(name)
        return value if value else default

    def require(self, name: str) -> str:
        value = self.param(name)
        if value is None:
            raise CommandError(f"Missing parameter: {name}")
        return value

    def current_interface(self) -> str:
        """The interface being configured: explicit parameter, else session state."""
        name = self.param("interface") or self.store.get_current(self.session_key)
        if not name:
            raise CommandError("Not in interface configuration mode (use 'interface <name>' first)")
        return name
