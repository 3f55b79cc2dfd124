"""
Per-session interface configuration state.

Every command runs in its own short-lived process, so "which interface am I
configuring" cannot live in memory. It is kept in one small file per
session instead, keyed by the session's identity: an explicit token when
the host shell provides one, otherwise the pid of the long-lived shell
process that spawned this command.
"""

import os
import re
from pathlib import Path
from typing import Callable, Optional

from vppsh_lib.common.files import atomic_write_text
from vppsh_lib.common.vpp import reply_failed, reply_already_exists
from vppsh_lib.config import SESSION_DIR, loopback_instance, split_subinterface

SESSION_ENV = "VPPSH_SESSION"
KEY_UNSAFE_RE = re.compile(r'[^A-Za-z0-9_.-]')


class SessionError(Exception):
    """Raised when the session record cannot be read or written."""
    pass


class InterfaceEntryError(Exception):
    """Raised when a synthetic interface cannot be created."""
    pass


def resolve_session_key(explicit: Optional[str] = None) -> str:
    """
    Determine the session key for this invocation.

    Args:
        explicit: Token passed by the host shell (e.g., --session)

    Returns:
        The explicit token, else $VPPSH_SESSION, else the parent pid
    """
    key = explicit or os.environ.get(SESSION_ENV)
    if key:
        return key
    return str(os.getppid())


class SessionStore:
    """File-backed map of session key -> current interface name."""

    def __init__(self, directory: Path = SESSION_DIR):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        safe = KEY_UNSAFE_RE.sub("_", str(key))
        return self.directory / f"vppsh-{safe}.iface"

    def _failed(self, key: str, e: Exception) -> SessionError:
        return SessionError(f"Cannot access session state {self.path_for(key)}: {e}")

    def prepare(self, key: str) -> None:
        """
        Check that the session record can be written.

        Raises:
            SessionError: If the session directory cannot be created or written
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise self._failed(key, e.strerror or e)
        if not os.access(self.directory, os.W_OK | os.X_OK):
            raise self._failed(key, "Permission denied")

    def get_current(self, key: str) -> Optional[str]:
        """Return the session's current interface, or None outside interface mode."""
        try:
            name = self.path_for(key).read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeError) as e:
            raise self._failed(key, e)
        return name or None

    def set_current(self, key: str, name: str) -> None:
        """Record the session's current interface, replacing any previous one."""
        try:
            atomic_write_text(self.path_for(key), f"{name}\n")
        except OSError as e:
            raise self._failed(key, e.strerror or e)

    def clear_current(self, key: str) -> None:
        """Leave interface mode; a session with no record is left as is."""
        try:
            self.path_for(key).unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise self._failed(key, e.strerror or e)


def creation_command(name: str) -> Optional[str]:
    """VPP command that creates a synthetic interface, or None for other names."""
    instance = loopback_instance(name)
    if instance is not None:
        return f"create loopback interface instance {instance}"

    sub = split_subinterface(name)
    if sub:
        parent, vlan_id = sub
        return f"create sub-interfaces {parent} {vlan_id}"

    return None


def enter_interface(name: str, store: SessionStore, key: str,
                    exec_fn: Callable[[str], str]) -> Optional[str]:
    """
    Enter interface configuration mode.

    Synthetic interfaces (loopN, parent.vlan) are created first; a reply
    saying the interface already exists counts as success.

    Args:
        name: Interface name
        store: Session store
        key: Session key
        exec_fn: Function that runs one VPP command and returns its reply

    Returns:
        The creation reply when a creation command was issued, else None

    Raises:
        InterfaceEntryError: If creation failed; the session is unchanged
        SessionError: If the session record cannot be written; nothing is
            sent to VPP
    """
    store.prepare(key)

    reply = None
    command = creation_command(name)
    if command:
        reply = exec_fn(command)
        if reply_failed(reply) and not reply_already_exists(reply):
            raise InterfaceEntryError(reply.strip() or f"Failed to create {name}")

    store.set_current(key, name)
    return reply
