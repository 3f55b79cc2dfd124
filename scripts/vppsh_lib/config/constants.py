"""
Configuration constants for vppsh.

Paths and default values used across the configuration system.
"""

from pathlib import Path


# VPP control endpoint
VPP_CLI_SOCKET = Path("/run/vpp/cli.sock")
VPP_PROMPT = "vpp# "

# vppsh paths
SETTINGS_FILE = Path("/etc/vppsh/vppsh.yaml")
SESSION_DIR = Path("/run/vppsh")
STARTUP_CONFIG = Path("/etc/vppsh/startup.conf")
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# Channel limits
DEFAULT_TIMEOUT = 5.0
DEFAULT_REPLY_LIMIT = 8192

# Report parsing
DEFAULT_MTU = 9000
MAX_ADDRESSES = 8
