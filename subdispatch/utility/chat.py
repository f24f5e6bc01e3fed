"""
Chat color codes.

Messages are written with an alternate color character ('&c', '&a', ...) and
translated to section-sign codes ('§c') before they are sent. Telnet clients
get the section-sign codes rendered as ANSI escapes by to_ansi().
"""

import re

COLOR_CHAR = "§"
COLOR_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRr"

_STRIP_PATTERN = re.compile(COLOR_CHAR + "[0-9a-fk-or]", re.IGNORECASE)

ansi_map = {
    "0": "\033[30m",   # black
    "1": "\033[34m",   # dark blue
    "2": "\033[32m",   # dark green
    "3": "\033[36m",   # dark aqua
    "4": "\033[31m",   # dark red
    "5": "\033[35m",   # dark purple
    "6": "\033[33m",   # gold
    "7": "\033[37m",   # gray
    "8": "\033[90m",   # dark gray
    "9": "\033[94m",   # blue
    "a": "\033[92m",   # green
    "b": "\033[96m",   # aqua
    "c": "\033[91m",   # red
    "d": "\033[95m",   # light purple
    "e": "\033[93m",   # yellow
    "f": "\033[97m",   # white
    "k": "\033[5m",    # obfuscated (blink)
    "l": "\033[1m",    # bold
    "m": "\033[9m",    # strikethrough
    "n": "\033[4m",    # underline
    "o": "\033[3m",    # italic
    "r": "\033[0m",    # reset
}


def translate_alternate_color_codes(alt_char: str, text: str) -> str:
    """Replace alt_char + code pairs with section-sign color codes."""
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1] in COLOR_CODES:
            chars[i] = COLOR_CHAR
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)


def strip_color(text: str) -> str:
    return _STRIP_PATTERN.sub("", text)


def to_ansi(text: str) -> str:
    """Render section-sign color codes as ANSI escapes."""
    used = False

    def _replace(match):
        nonlocal used
        used = True
        return ansi_map[match.group(0)[1].lower()]

    rendered = _STRIP_PATTERN.sub(_replace, text)
    if used:
        rendered += ansi_map["r"]
    return rendered
