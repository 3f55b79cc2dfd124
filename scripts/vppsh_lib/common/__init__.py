"""
vppsh_lib.common - Shared utilities for vppsh

This module provides:
- colors: ANSI color codes and logging functions
- files: Atomic file replacement
- telnet: Telnet control-sequence filter for CLI replies
- vpp: VPP command execution utilities
"""

from .colors import Colors, paint, log, warn, error, info
from .files import atomic_write_text
from .telnet import TelnetFilter, strip_telnet
from .vpp import (
    vpp_exec,
    socket_available,
    clean_reply,
    reply_failed,
    reply_already_exists,
    channel_error,
)

__all__ = [
    'Colors', 'paint', 'log', 'warn', 'error', 'info',
    'atomic_write_text',
    'TelnetFilter', 'strip_telnet',
    'vpp_exec', 'socket_available', 'clean_reply',
    'reply_failed', 'reply_already_exists', 'channel_error',
]
