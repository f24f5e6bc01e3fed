"""
Host command map.

Binds top-level command labels (and their aliases) to executors, the way a
server's plugin loader hands each plugin command to its CommandManager.
"""

from typing import Dict, List

from subdispatch.utility.logger import game_log
from subdispatch.utility.utils import split_command_line

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Type 'help' for a list of commands."


class CommandHost:
    def __init__(self):
        self._executors: Dict[str, object] = {}
        self._labels: List[str] = []

    def register(self, label: str, executor, aliases=()) -> None:
        """
        Bind a top-level label and its aliases to an executor.

        Raises ValueError if any of the names is already taken.
        """
        keys = [label.lower()] + [a.lower() for a in aliases]
        for key in keys:
            if key in self._executors:
                raise ValueError(f"Command label collision: '{key}' is already registered")
        for key in keys:
            self._executors[key] = executor
        self._labels.append(label.lower())
        game_log("HOST", f"Registered /{label}" + (f" (aliases: {', '.join(aliases)})" if aliases else ""))

    def labels(self) -> List[str]:
        return list(self._labels)

    def executor_for(self, label: str):
        return self._executors.get(label.lower())

    def handle_line(self, sender, line: str) -> bool:
        """
        Route one input line to the executor bound to its label.

        Returns False only when the label is unknown or the line is blank.
        """
        label, args = split_command_line(line)
        if label is None:
            return False

        executor = self.executor_for(label)
        if executor is None:
            sender.send_message(UNKNOWN_COMMAND_MESSAGE)
            return False

        return executor.perform(sender, label, args)
