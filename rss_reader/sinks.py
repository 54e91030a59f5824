import os, sys
from typing import TextIO

from rss_reader.exceptions import ContractError


class LineWriter:
    """Line-oriented output: a file opened for writing, or stdout when no path is given.

    stdout is never closed, only flushed.
    """

    def __init__(self, target: str | None = None):
        self.name = target or "<stdout>"
        self._owned = target is not None
        if self._owned and os.path.dirname(target):
            os.makedirs(os.path.dirname(target), exist_ok=True)
        self._stream: TextIO | None = (
            open(target, "w", encoding="utf-8") if self._owned else sys.stdout
        )

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def write_line(self, text: str) -> None:
        if self._stream is None:
            raise ContractError(f"{self.name} is closed")
        self._stream.write(text + "\n")

    def close(self) -> None:
        if self._stream is None:
            return
        if self._owned:
            self._stream.close()
        else:
            self._stream.flush()
        self._stream = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
