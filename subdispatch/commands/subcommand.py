# ============================================================
# subdispatch/commands/subcommand.py
# ============================================================
"""
Subcommand descriptors and the permission gate.

A descriptor carries the four pieces of metadata every subcommand must
declare (name, description, syntax, permission) together with the behavior
that runs once the permission check passes. Metadata is checked when the
descriptor is built, so a plugin with an incomplete subcommand fails at
startup instead of at dispatch time.
"""

import functools
from dataclasses import dataclass
from typing import Any, Callable, List

from subdispatch.utility.chat import translate_alternate_color_codes
from subdispatch.utility.logger import game_log

NO_PERMISSION_MESSAGE = "&cYou cannot execute this command."

Behavior = Callable[[Any, List[str]], None]


class MissingMetadataError(ValueError):
    """A subcommand was built without its required metadata."""


def _require_text(owner: str, field_name: str, value, allow_empty: bool):
    if value is None:
        raise MissingMetadataError(f"Subcommand {owner!r} is missing '{field_name}'")
    if not isinstance(value, str):
        raise MissingMetadataError(
            f"Subcommand {owner!r}: '{field_name}' must be a string, got {type(value).__name__}"
        )
    if not allow_empty and not value.strip():
        raise MissingMetadataError(f"Subcommand {owner!r}: '{field_name}' must not be empty")


@dataclass(frozen=True)
class SubcommandDescriptor:
    name: str
    description: str
    syntax: str
    permission: str
    behavior: Behavior

    def __post_init__(self):
        owner = self.name if isinstance(self.name, str) and self.name else getattr(
            self.behavior, "__qualname__", repr(self.behavior)
        )
        _require_text(owner, "name", self.name, allow_empty=False)
        if any(ch.isspace() for ch in self.name):
            raise MissingMetadataError(f"Subcommand {owner!r}: 'name' must be a single token")
        _require_text(owner, "description", self.description, allow_empty=True)
        _require_text(owner, "syntax", self.syntax, allow_empty=True)
        _require_text(owner, "permission", self.permission, allow_empty=False)
        if not callable(self.behavior):
            raise MissingMetadataError(f"Subcommand {owner!r}: behavior must be callable")

    def matches(self, token: str) -> bool:
        return self.name.casefold() == token.casefold()

    def help_line(self) -> str:
        return f"{self.syntax} - {self.description}"

    def execute(self, actor, args: List[str]) -> bool:
        return guarded_execute(self, actor, args)


def guarded_execute(descriptor: SubcommandDescriptor, actor, args: List[str]) -> bool:
    """
    Run a subcommand behind its permission check.

    Returns True when the behavior ran, False when the actor was denied.
    Whatever the behavior does (or raises) is its own business.
    """
    if not actor.has_permission(descriptor.permission):
        game_log(
            "PERMISSION",
            f"{getattr(actor, 'name', actor)} denied '{descriptor.name}' ({descriptor.permission})",
        )
        actor.send_message(translate_alternate_color_codes("&", NO_PERMISSION_MESSAGE))
        return False
    descriptor.behavior(actor, args)
    return True


def requires_permission(permission: str):
    """
    Apply the same permission gate to any (actor, args) callable.

    Example:
        @requires_permission("demo.admin")
        def reset(actor, args): ...
    """
    if not permission:
        raise MissingMetadataError("requires_permission() needs a non-empty permission")

    def decorator(func: Behavior):
        @functools.wraps(func)
        def wrapper(actor, args):
            if not actor.has_permission(permission):
                actor.send_message(translate_alternate_color_codes("&", NO_PERMISSION_MESSAGE))
                return None
            return func(actor, args)
        return wrapper
    return decorator


def subcommand(name: str = None, *, description: str = None, syntax: str = None, permission: str = None):
    """
    Build a descriptor from a behavior function.

    Example:
        @subcommand("heal", description="Heals you", syntax="/mycmd heal",
                    permission="mycmd.heal")
        def heal(player, args): ...
    """
    def decorator(func: Behavior) -> SubcommandDescriptor:
        return SubcommandDescriptor(
            name=name,
            description=description,
            syntax=syntax,
            permission=permission,
            behavior=func,
        )
    return decorator
