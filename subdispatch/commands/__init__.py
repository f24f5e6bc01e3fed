# ============================================================
# subdispatch/commands/__init__.py
# ============================================================
"""
Subcommand System
-----------------
One CommandManager per top-level command. Subcommands are descriptors
(name, description, syntax, permission + behavior) registered on the
manager during plugin startup.
"""

from .core import CommandManager, CommandRegistry
from .subcommand import (
    NO_PERMISSION_MESSAGE,
    MissingMetadataError,
    SubcommandDescriptor,
    guarded_execute,
    requires_permission,
    subcommand,
)

__all__ = [
    "CommandManager",
    "CommandRegistry",
    "MissingMetadataError",
    "NO_PERMISSION_MESSAGE",
    "SubcommandDescriptor",
    "guarded_execute",
    "requires_permission",
    "subcommand",
]
