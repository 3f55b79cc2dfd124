"""
Runtime settings for vppsh.

Settings are read from a YAML file (default /etc/vppsh/vppsh.yaml, or the
path in $VPPSH_CONFIG). Every key is optional; a missing file means all
defaults. Example:

    socket: /run/vpp/cli.sock
    transport: socket        # or "vppctl"
    timeout: 5
    reply_limit: 65536
    max_addresses: 16
    session_dir: /run/vppsh
    startup_config: /etc/vppsh/startup.conf
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .constants import (
    VPP_CLI_SOCKET,
    VPP_PROMPT,
    SETTINGS_FILE,
    SESSION_DIR,
    STARTUP_CONFIG,
    DEFAULT_TIMEOUT,
    DEFAULT_REPLY_LIMIT,
    MAX_ADDRESSES,
)

TRANSPORTS = ("socket", "vppctl")


class SettingsError(Exception):
    """Raised when the settings file cannot be used."""
    pass


@dataclass
class Settings:
    """Channel, parser and storage settings."""
    socket: Path = VPP_CLI_SOCKET
    transport: str = "socket"
    timeout: float = DEFAULT_TIMEOUT
    reply_limit: int = DEFAULT_REPLY_LIMIT
    max_addresses: int = MAX_ADDRESSES
    session_dir: Path = SESSION_DIR
    startup_config: Path = STARTUP_CONFIG
    prompt: str = VPP_PROMPT


def settings_from_dict(data: dict) -> Settings:
    """Build Settings from a parsed YAML mapping, checking keys and types."""
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise SettingsError(f"Unknown settings: {', '.join(unknown)}")

    values = {}
    for key, value in data.items():
        if key in ("socket", "session_dir", "startup_config"):
            if not isinstance(value, str) or not value:
                raise SettingsError(f"{key} must be a path")
            values[key] = Path(value)
        elif key in ("reply_limit", "max_addresses"):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise SettingsError(f"{key} must be a positive integer")
            values[key] = value
        elif key == "timeout":
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise SettingsError("timeout must be a positive number")
            values[key] = float(value)
        elif key == "transport":
            if value not in TRANSPORTS:
                raise SettingsError(f"transport must be one of: {', '.join(TRANSPORTS)}")
            values[key] = value
        elif key == "prompt":
            if not isinstance(value, str):
                raise SettingsError("prompt must be a string")
            values[key] = value

    return Settings(**values)


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML.

    Args:
        path: Settings file; defaults to $VPPSH_CONFIG or SETTINGS_FILE

    Returns:
        Settings (all defaults when the file does not exist)

    Raises:
        SettingsError: If the file cannot be read, on YAML syntax errors or
            invalid values
    """
    if path is None:
        path = Path(os.environ.get("VPPSH_CONFIG", str(SETTINGS_FILE)))

    if not path.exists():
        return Settings()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SettingsError(f"Cannot read {path}: {e.strerror or e}")
    except UnicodeError as e:
        raise SettingsError(f"Cannot read {path}: {e}")
    except yaml.YAMLError as e:
        raise SettingsError(f"YAML syntax error in {path}: {e}")

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise SettingsError(f"{path}: expected a mapping of settings")

    return settings_from_dict(data)
