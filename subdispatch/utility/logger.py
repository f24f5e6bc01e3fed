from .utils import load_config

color_map = {
    # --- Command System ---
    "REGISTRY": "\033[95m",     # magenta - subcommand registration
    "DISPATCH": "\033[94m",     # blue - routing of top-level invocations
    "PERMISSION": "\033[91m",   # red - denied executions

    # --- Host ---
    "HOST": "\033[96m",         # cyan - top-level command map
    "NET": "\033[92m",          # green - telnet connections
    "PLUGIN": "\033[93m",       # yellow - plugin enable / startup

    # --- Reset ---
    "END": "\033[0m"
}


def game_log(category: str, message: str, level="info"):
    """
    Unified console logger for the command system and its host.

    Categories: "REGISTRY", "DISPATCH", "PERMISSION", "HOST", "NET", "PLUGIN".
    Filtered by the `logging` section of config.yaml; an unreadable config
    falls back to the defaults (enabled, level "info").
    """
    try:
        cfg = load_config("config.yaml").get("logging", {})
    except (FileNotFoundError, ValueError, AttributeError):
        cfg = {}
    if not isinstance(cfg, dict):
        cfg = {}
    if not cfg.get("enabled", True):
        return

    # Level filtering
    allowed_levels = {"debug": 1, "info": 0}
    current_level = cfg.get("level", "info")
    if allowed_levels.get(level, 0) > allowed_levels.get(current_level, 0):
        return

    color = color_map.get(category.upper(), "")
    end = color_map.get("END", "")
    prefix = f"{color}[{category.upper()}]{end}"
    print(f"{prefix} {message}")
