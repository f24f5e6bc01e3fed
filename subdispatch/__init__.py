"""Subcommand dispatch for plugin commands, with a small telnet host."""

__version__ = "0.10.0"
