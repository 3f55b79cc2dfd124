"""
VPP command execution utilities.

Sends one CLI command to VPP and returns its textual reply, either over the
CLI socket directly or through vppctl. Failures never raise: the reply is
always a string, and a failed exchange yields an "Error: ..." diagnostic.
"""

import socket
import subprocess
from pathlib import Path
from typing import Optional, Tuple

from vppsh_lib.config import Settings
from .colors import warn
from .telnet import TelnetFilter

RECV_SIZE = 4096

# Substrings VPP uses in replies to rejected commands
FAILURE_MARKERS = (
    "unknown input",
    "unknown interface",
    "error",
    "invalid",
    "failed",
    "not found",
    "cannot",
)

EXISTS_MARKERS = ("already exists", "already in use")


def socket_available(settings: Optional[Settings] = None) -> bool:
    """Check that the VPP CLI socket exists."""
    settings = settings or Settings()
    return Path(settings.socket).exists()


def _truncate(data: bytes, limit: int) -> Tuple[bytes, bool]:
    if len(data) > limit:
        return data[:limit], True
    return data, False


def _exchange_socket(line: str, settings: Settings) -> Tuple[bytes, bool]:
    """
    Run one command over the CLI socket.

    Returns:
        (filtered payload, truncated)

    Raises:
        OSError: If the socket cannot be reached or written
    """
    telnet = TelnetFilter()
    payload = bytearray()
    truncated = False

    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.settimeout(settings.timeout)
        sock.connect(str(settings.socket))
        sock.sendall(f"{line}\n".encode())
        # Half-close so VPP ends the session once the reply is written
        sock.shutdown(socket.SHUT_WR)

        while True:
            try:
                chunk = sock.recv(RECV_SIZE)
            except socket.timeout:
                break
            if not chunk:
                break
            payload += telnet.feed(chunk)
            if len(payload) > settings.reply_limit:
                truncated = True
                break

    data, cut = _truncate(bytes(payload), settings.reply_limit)
    return data, truncated or cut


def _exchange_vppctl(line: str, settings: Settings) -> Tuple[bytes, bool]:
    """
    Run one command through vppctl.

    Raises:
        OSError: If vppctl cannot be started
        subprocess.TimeoutExpired: If vppctl does not finish in time
        RuntimeError: If vppctl fails with a message on stderr
    """
    result = subprocess.run(
        ["vppctl", "-s", str(settings.socket), line],
        capture_output=True,
        timeout=settings.timeout
    )
    stderr = result.stderr.decode(errors="replace").strip()
    if result.returncode != 0 and stderr:
        raise RuntimeError(stderr)
    return _truncate(TelnetFilter().feed(result.stdout), settings.reply_limit)


def clean_reply(text: str, prompt: str) -> str:
    """Normalise line endings and remove echoed VPP prompts."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    marker = prompt.strip()
    if not marker:
        return text

    lines = []
    for line in text.split("\n"):
        stripped = line
        while stripped.startswith(marker):
            stripped = stripped[len(marker):].lstrip(" ")
        if stripped != line and not stripped:
            continue  # Bare prompt line
        lines.append(stripped)
    return "\n".join(lines)


def vpp_exec(command: str, settings: Optional[Settings] = None) -> str:
    """
    Execute a VPP CLI command and capture its reply.

    Args:
        command: VPP CLI command (e.g., "show interface"); trailing newlines
            are ignored
        settings: Channel settings (socket path, transport, limits)

    Returns:
        The reply text with telnet control sequences removed. On failure the
        text is a diagnostic beginning with "Error:".
    """
    settings = settings or Settings()
    line = command.rstrip("\r\n")

    if settings.transport == "vppctl":
        try:
            data, truncated = _exchange_vppctl(line, settings)
        except FileNotFoundError:
            return "Error: vppctl not found\n"
        except subprocess.TimeoutExpired:
            return "Error: Command timed out\n"
        except (OSError, RuntimeError) as e:
            return f"Error: {e}\n"
    else:
        if not Path(settings.socket).exists():
            return f"Error: Cannot connect to VPP: socket not found: {settings.socket}\n"
        try:
            data, truncated = _exchange_socket(line, settings)
        except socket.timeout:
            return "Error: Cannot connect to VPP: timed out\n"
        except OSError as e:
            return f"Error: Cannot connect to VPP: {e.strerror or e}\n"

    if truncated:
        warn(f"VPP reply truncated at {settings.reply_limit} bytes (see reply_limit setting)")

    return clean_reply(data.decode(errors="replace"), settings.prompt)


def reply_failed(reply: str) -> bool:
    """True if a reply to a configuration command reports a failure."""
    lowered = reply.lower()
    return any(marker in lowered for marker in FAILURE_MARKERS)


def reply_already_exists(reply: str) -> bool:
    """True if a creation command failed only because the object exists."""
    lowered = reply.lower()
    return any(marker in lowered for marker in EXISTS_MARKERS)


def channel_error(reply: str) -> bool:
    """True if the reply is a channel diagnostic rather than VPP output."""
    return reply.startswith("Error:")
