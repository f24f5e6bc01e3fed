# ============================================================
# subdispatch/plugins/demo.py
# ============================================================
"""
Demo plugin: the /demo command and its subcommands.

    /demo                  → list subcommands
    /demo helloWorld       → greet the player
    /demo heal [amount]    → restore health
    /demo perms            → list the player's permissions
"""

from subdispatch.commands import CommandManager
from subdispatch.utility.chat import translate_alternate_color_codes
from subdispatch.utility.logger import game_log

MAX_HEALTH = 20


def build_manager() -> CommandManager:
    manager = CommandManager()

    @manager.subcommand("helloWorld", description="Says hello to you.",
                        syntax="/demo helloWorld", permission="demo.helloworld")
    def hello_world(player, args):
        player.send_message(translate_alternate_color_codes("&", f"&aHello, {player.name}!"))

    @manager.subcommand("heal", description="Heals you.",
                        syntax="/demo heal [amount]", permission="demo.heal")
    def heal(player, args):
        current = player.health
        amount = MAX_HEALTH
        if len(args) > 1:
            if not args[1].isdecimal():
                player.send_message("Usage: /demo heal [amount]")
                return
            amount = int(args[1])
        player.health = min(MAX_HEALTH, current + amount)
        player.send_message(f"You have been healed. Health: {player.health}/{MAX_HEALTH}")

    @manager.subcommand("perms", description="Lists your permissions.",
                        syntax="/demo perms", permission="demo.perms")
    def perms(player, args):
        if getattr(player, "op", False):
            player.send_message("You are an operator and hold every permission.")
            return
        granted = sorted(getattr(player, "permissions", ()))
        if not granted:
            player.send_message("You hold no permissions.")
            return
        player.send_message("Permissions: " + ", ".join(granted))

    return manager


def enable(host) -> CommandManager:
    """Register /demo (alias /democommand) on the host."""
    manager = build_manager()
    host.register("demo", manager, aliases=("democommand",))
    game_log("PLUGIN", f"Demo plugin enabled with {len(manager.registry)} subcommands")
    return manager
