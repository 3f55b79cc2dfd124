"""
vppsh_lib - Shared library for the vppsh router-style CLI bridge

This package translates router-style configuration verbs into VPP CLI
commands, cleans and parses VPP's text reports, and keeps per-session
interface configuration state between stateless command invocations.
"""

__version__ = "1.0.0"
