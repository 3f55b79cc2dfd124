#!/usr/bin/env python3
"""
vppsh.py - Router-style command bridge for VPP

The host shell runs this script once per command. Commands that work on
"the current interface" find it through the session store, keyed by the
host shell's process (or an explicit session token).

Usage:
    vppsh.py show_interfaces
    vppsh.py interface interface=loop5
    vppsh.py config_interface_ip address=10.0.0.1 mask=255.255.255.0
    vppsh.py --session tty3 add_ip_route 10.1.0.0 255.255.0.0 10.0.0.254
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from vppsh_lib.commands import CommandContext, parse_params
from vppsh_lib.common import error, warn, socket_available
from vppsh_lib.config import SettingsError, load_settings
from vppsh_lib.dispatcher import dispatch
from vppsh_lib.session import SessionStore, resolve_session_key


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Router-style CLI bridge for VPP")
    parser.add_argument("--config", type=Path, default=None,
                        help="Settings file (default: $VPPSH_CONFIG or /etc/vppsh/vppsh.yaml)")
    parser.add_argument("--session", default=None,
                        help="Session token (default: $VPPSH_SESSION or the parent process id)")
    parser.add_argument("command", help="Command name (see 'help')")
    parser.add_argument("params", nargs=argparse.REMAINDER,
                        help="Parameters as name=value, or positional values")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except SettingsError as e:
        error(str(e))
        return 1

    if settings.transport == "socket" and args.command != "help" and not socket_available(settings):
        warn(f"VPP CLI socket not found at {settings.socket}. VPP may not be running.")

    params, positional = parse_params(args.params)
    ctx = CommandContext(
        session_key=resolve_session_key(args.session),
        store=SessionStore(settings.session_dir),
        settings=settings,
        params=params,
        args=positional,
    )
    return dispatch(args.command, ctx)


if __name__ == "__main__":
    sys.exit(main())
