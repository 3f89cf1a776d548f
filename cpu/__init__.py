"""
cpu - run shell commands on a remote machine preserving the local context.

cpu is a thin layer around ssh(1) that deduces which directory on the
remote the command should run in, attaches the local terminal to the
remote one and forwards a small set of environment variables.
"""

__version__ = "0.1.0"
