"""Output formats of the CLI. The launcher only ever prints two things: state lines for
the events of a command, and the table of versions found by a search.
"""

from .lang import get_raw as _raw

import sys

from typing import List, Tuple, Optional


# Rows of the search table, the first row is the header.
VersionRows = List[Tuple[str, str]]


class Output:
    """Abstract output of the CLI, implementations choose how lines are formatted.
    """

    def event(self, state: Optional[str], key: str, **kwargs) -> None:
        """Print a line for an event of the current command, the message is found in the
        language table from its key and formatted with the keyword arguments. The ".."
        state marks a pending event, its line is replaced by the next one when possible.
        """
        raise NotImplementedError

    def versions(self, rows: VersionRows) -> None:
        """Print the table of versions, the first row is the header.
        """
        raise NotImplementedError

    def print(self, text: str) -> None:
        """Raw print of the given text, no new line is added.
        """
        raise NotImplementedError


class HumanOutput(Output):

    state_colors = {
        "OK": "\033[92m",
        "FAILED": "\033[31m",
        "WARN": "\033[33m",
        "INFO": "\033[34m",
    }

    def __init__(self, color: bool) -> None:
        self.color = color
        self.pending_len: Optional[int] = None

    def format_state(self, state: Optional[str]) -> str:
        if state is None:
            return " " * 9
        color = self.state_colors.get(state) if self.color else None
        if color is None:
            return f"[{state:^6s}] "
        return f"[{color}{state:^6s}\033[0m] "

    def event(self, state: Optional[str], key: str, **kwargs) -> None:

        msg = _raw(key, kwargs)
        line = self.format_state(state) + msg

        if self.pending_len is not None:
            # Go back to the start of the pending line and pad over its remaining text.
            line = "\r" + line + " " * max(0, self.pending_len - len(msg))
            self.pending_len = None

        if state == "..":
            self.pending_len = len(msg)
            sys.stdout.write(line)
            sys.stdout.flush()
        else:
            print(line)

    def versions(self, rows: VersionRows) -> None:

        width = max(len(name) for name, _ in rows)
        header, *rows = rows

        print(f"{header[0]:<{width}s}  {header[1]}")
        print(f"{'-' * width}  {'-' * len(header[1])}")
        for name, main_class in rows:
            print(f"{name:<{width}s}  {main_class}")

    def print(self, text: str) -> None:
        print(text, end="")


class MachineOutput(Output):
    """Output of lines such as `event:OK,start.spawned,pid=42`, the name of the line is
    followed by comma separated values where commas and line breaks are escaped.
    """

    escape_table = str.maketrans({",": "\\,", "\n": "\\n", "\r": "\\r"})

    @classmethod
    def escape(cls, value: str) -> str:
        return value.translate(cls.escape_table)

    def emit(self, name: str, *args: str, **kwargs) -> None:
        values = [*args, *(f"{k}={v}" for k, v in kwargs.items())]
        print(f"{name}:{','.join(self.escape(value) for value in values)}")

    def event(self, state: Optional[str], key: str, **kwargs) -> None:
        self.emit("event", str(state), key, **kwargs)

    def versions(self, rows: VersionRows) -> None:
        # The header is only meant to be read by humans.
        for name, main_class in rows[1:]:
            self.emit("version", name, main_class)

    def print(self, text: str) -> None:
        self.emit("print", text)
