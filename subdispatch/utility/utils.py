import os
import re
from pathlib import Path

import yaml


def config_dir() -> Path:
    """Directory holding the YAML config files (override with SUBDISPATCH_CONFIG_DIR)."""
    override = os.environ.get("SUBDISPATCH_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[1] / "config"


def load_config(path="config.yaml"):
    """Load host configuration from a YAML file."""
    config_path = config_dir() / path
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file '{config_path}' not found.")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {config_path}: {e}")


def validate_player_name(name: str) -> str:
    """
    Validate and normalize a player name.

    Rules:
      • Must not be empty or whitespace.
      • Must contain only A–Z, a–z, 0–9 and underscore.
      • Length between 3 and 16 characters.
      • Must not match reserved names (console, server, etc.).

    Returns:
        str: The validated player name (original case preserved)
    Raises:
        ValueError: If invalid or reserved.
    """
    if not name or not name.strip():
        raise ValueError("Name cannot be empty or whitespace.")

    name = name.strip()

    if len(name) < 3 or len(name) > 16:
        raise ValueError("Name must be between 3 and 16 characters long.")

    if not re.fullmatch(r"[A-Za-z0-9_]+", name):
        raise ValueError("Name must contain only letters, numbers and underscores.")

    reserved_words = {"console", "server", "rcon", "system", "null", "none"}
    if name.lower() in reserved_words:
        raise ValueError("That name is reserved and cannot be used.")

    return name


def split_command_line(line: str):
    """
    Split a raw input line into (label, args).

    A single leading '/' is optional. Returns (None, []) for blank input.
    """
    stripped = line.strip()
    if stripped.startswith("/"):
        stripped = stripped[1:]
    parts = stripped.split()
    if not parts:
        return None, []
    return parts[0], parts[1:]
