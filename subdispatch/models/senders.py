"""
Command senders
---------------
Everything that can issue a command: interactive players and the
non-interactive server console. Both hold permissions and receive messages;
only players take part in subcommand dispatch.
"""

from typing import Iterable, List, Optional, Set


class CommandSender:
    """Base sender. Every message sent is kept in `messages` until drained."""

    def __init__(self, name: str):
        self.name = name
        self.messages: List[str] = []

    def send_message(self, text: str) -> None:
        self.messages.append(text)

    def has_permission(self, permission: str) -> bool:
        return False

    def drain(self) -> List[str]:
        """Return and clear every message sent so far."""
        out, self.messages = self.messages, []
        return out

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class Player(CommandSender):
    """An interactive actor. Ops hold every permission."""

    def __init__(self, name: str, permissions: Optional[Iterable[str]] = None, op: bool = False, health: int = 20):
        super().__init__(name)
        self.permissions: Set[str] = set(permissions or ())
        self.op = op
        self.health = health

    def has_permission(self, permission: str) -> bool:
        return self.op or permission in self.permissions

    def grant(self, permission: str) -> None:
        self.permissions.add(permission)

    def revoke(self, permission: str) -> None:
        self.permissions.discard(permission)


class ConsoleSender(CommandSender):
    """The server console: all-powerful, but not a player."""

    def __init__(self, name: str = "CONSOLE"):
        super().__init__(name)

    def has_permission(self, permission: str) -> bool:
        return True


def player_from_config(name: str, cfg: dict) -> Player:
    """Build a Player with the permissions granted to `name` in config.yaml."""
    perms_cfg = cfg.get("permissions", {}) or {}
    granted = set(perms_cfg.get("default", []) or [])
    players = perms_cfg.get("players", {}) or {}
    for key, perms in players.items():
        if key.lower() == name.lower():
            granted.update(perms or [])
    ops = {o.lower() for o in (cfg.get("ops", []) or [])}
    return Player(name, granted, op=name.lower() in ops)
