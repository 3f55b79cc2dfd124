"""
vppsh_lib.config - Settings, constants and validation for vppsh.

This package contains:
- constants: Path and limit defaults (VPP_CLI_SOCKET, SESSION_DIR, etc.)
- settings: YAML-backed runtime settings
- validation: IP address, netmask and interface-name helpers
"""

from .constants import (
    VPP_CLI_SOCKET,
    VPP_PROMPT,
    SETTINGS_FILE,
    SESSION_DIR,
    STARTUP_CONFIG,
    TEMPLATE_DIR,
    DEFAULT_TIMEOUT,
    DEFAULT_REPLY_LIMIT,
    DEFAULT_MTU,
    MAX_ADDRESSES,
)

from .settings import (
    Settings,
    SettingsError,
    settings_from_dict,
    load_settings,
)

from .validation import (
    validate_ipv4,
    validate_ipv6,
    validate_ipv4_cidr,
    validate_ipv6_cidr,
    netmask_to_prefix,
    loopback_instance,
    split_subinterface,
)

__all__ = [
    # Constants
    'VPP_CLI_SOCKET',
    'VPP_PROMPT',
    'SETTINGS_FILE',
    'SESSION_DIR',
    'STARTUP_CONFIG',
    'TEMPLATE_DIR',
    'DEFAULT_TIMEOUT',
    'DEFAULT_REPLY_LIMIT',
    'DEFAULT_MTU',
    'MAX_ADDRESSES',
    # Settings
    'Settings',
    'SettingsError',
    'settings_from_dict',
    'load_settings',
    # Validation
    'validate_ipv4',
    'validate_ipv6',
    'validate_ipv4_cidr',
    'validate_ipv6_cidr',
    'netmask_to_prefix',
    'loopback_instance',
    'split_subinterface',
]
