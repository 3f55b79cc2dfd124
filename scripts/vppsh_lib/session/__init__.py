"""
vppsh_lib.session - Session state shared between command invocations

This package contains:
- store: File-backed current-interface store and interface-mode entry
"""

from .store import (
    SESSION_ENV,
    SessionError,
    InterfaceEntryError,
    SessionStore,
    resolve_session_key,
    creation_command,
    enter_interface,
)

__all__ = [
    'SESSION_ENV',
    'SessionError',
    'InterfaceEntryError',
    'SessionStore',
    'resolve_session_key',
    'creation_command',
    'enter_interface',
]
