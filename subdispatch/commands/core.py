# ============================================================
# subdispatch/commands/core.py
# ============================================================
"""
Subcommand registry and dispatcher.

Create one CommandManager per top-level command and register its
subcommands while the plugin starts. The host calls perform() for every
invocation of that command.

Features:
- Ordered registry (registration order = help order = lookup priority)
- Case-insensitive subcommand lookup
- Permission-gated execution
- Generated help listing when no subcommand is given
"""

from typing import Iterator, List, Optional

from subdispatch.models.senders import Player
from subdispatch.utility.logger import game_log
from .subcommand import SubcommandDescriptor, subcommand


# ------------------------------------------------------------
# Registry
# ------------------------------------------------------------
class CommandRegistry:
    """Ordered collection of subcommand descriptors."""

    def __init__(self):
        self._entries: List[SubcommandDescriptor] = []

    def register(self, descriptor: SubcommandDescriptor) -> SubcommandDescriptor:
        if not isinstance(descriptor, SubcommandDescriptor):
            raise TypeError(f"Expected a SubcommandDescriptor, got {type(descriptor).__name__}")
        self._entries.append(descriptor)
        game_log("REGISTRY", f"Registered subcommand '{descriptor.name}' ({descriptor.permission})", level="debug")
        return descriptor

    def find_by_name(self, token: str) -> Optional[SubcommandDescriptor]:
        for descriptor in self._entries:
            if descriptor.matches(token):
                return descriptor
        return None

    def list_all(self) -> List[SubcommandDescriptor]:
        return list(self._entries)

    def subcommand(self, name: str = None, *, description: str = None, syntax: str = None, permission: str = None):
        """
        Register a subcommand declared on a behavior function.
        Example:
            @registry.subcommand("heal", description="Heals you",
                                 syntax="/mycmd heal", permission="mycmd.heal")
            def heal(player, args): ...
        """
        build = subcommand(name, description=description, syntax=syntax, permission=permission)

        def decorator(func):
            return self.register(build(func))
        return decorator

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[SubcommandDescriptor]:
        return iter(list(self._entries))

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and self.find_by_name(name) is not None


# ------------------------------------------------------------
# Dispatcher
# ------------------------------------------------------------
class CommandManager:
    """
    Dispatches one top-level command to its subcommands.

    perform() always returns True: the host treats the command as handled
    and never prints its own usage message.
    """

    def __init__(self, registry: CommandRegistry = None):
        self.registry = registry if registry is not None else CommandRegistry()

    def register_subcommand(self, descriptor: SubcommandDescriptor) -> SubcommandDescriptor:
        return self.registry.register(descriptor)

    def subcommand(self, name: str = None, *, description: str = None, syntax: str = None, permission: str = None):
        return self.registry.subcommand(name, description=description, syntax=syntax, permission=permission)

    def perform(self, sender, label: str, args) -> bool:
        if not isinstance(sender, Player):
            game_log("DISPATCH", f"Ignoring /{label} from non-player {sender!r}", level="debug")
            return True

        args = list(args)
        if args:
            descriptor = self.registry.find_by_name(args[0])
            if descriptor is None:
                game_log("DISPATCH", f"{sender.name}: no subcommand '{args[0]}' under /{label}", level="debug")
                return True
            game_log("DISPATCH", f"{sender.name}: /{label} {descriptor.name}", level="debug")
            descriptor.execute(sender, args)
            return True

        for descriptor in self.registry.list_all():
            sender.send_message(descriptor.help_line())
        return True
