"""Editor state: the text buffer, the cursor, the mode, and file I/O."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

MAX_LINES = 10000
MAX_COLS = 10000

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class EditorMode(enum.Enum):
    """The two modes of the editor; the value is the label shown in the status line."""

    NORMAL = "NORMAL"
    INSERT = "INSERT"


@dataclass
class EditorState:
    """Everything the editor knows: lines of text, cursor, mode and scroll offsets."""

    buffer: list[str] = field(default_factory=lambda: [""])
    row: int = 0
    col: int = 0
    mode: EditorMode = EditorMode.NORMAL
    scroll_offset_row: int = 0
    scroll_offset_col: int = 0
    filename: str | None = None
    status_msg: str | None = None

    @classmethod
    def from_file(cls, filename):
        """Create a state holding the contents of ``filename``.

        A missing or unreadable file, or no filename at all, gives an empty buffer.
        Lines longer than ``MAX_COLS - 1`` are cut, and at most ``MAX_LINES`` are kept.
        """
        if filename is None:
            return cls()
        try:
            with open(filename, encoding=_ENCODING, errors=_ERRORS, newline="") as fh:
                text = fh.read()
        except OSError:
            return cls(filename=filename)
        rows = text.split("\n")[:MAX_LINES]
        return cls(buffer=[row[: MAX_COLS - 1] for row in rows], filename=filename)

    @property
    def total_lines(self):
        """Number of lines in the buffer."""
        return len(self.buffer)

    def status_line(self):
        """The text of the bottom status line."""
        message = self.status_msg if self.status_msg is not None else ""
        return f"{self.mode.value} {self.row + 1}:{self.col + 1} \t {message}"

    def insert_char(self, ch):
        """Insert ``ch`` at the cursor, padding with spaces if the cursor is past the end."""
        if self.col >= MAX_COLS - 1:
            return
        line = self.buffer[self.row]
        if self.col > len(line):
            line = line.ljust(self.col)
        self.buffer[self.row] = line[: self.col] + ch + line[self.col :]
        self.col += 1

    def delete_char(self):
        """Delete the character before the cursor, if there is one on this line."""
        if self.col > 0:
            line = self.buffer[self.row]
            self.buffer[self.row] = line[: self.col - 1] + line[self.col :]
            self.col -= 1

    def split_line(self):
        """Break the current line at the cursor and move to the start of the new line."""
        if self.total_lines >= MAX_LINES:
            return
        line = self.buffer[self.row]
        self.buffer[self.row] = line[: self.col]
        self.buffer.insert(self.row + 1, line[self.col :])
        self.row += 1
        self.col = 0

    def merge_line(self):
        """Join the current line onto the previous one, leaving the cursor at the seam."""
        if self.row == 0:
            return
        previous = self.buffer[self.row - 1]
        self.buffer[self.row - 1] = previous + self.buffer.pop(self.row)
        self.row -= 1
        self.col = len(previous)

    def save(self):
        """Write the buffer to ``filename``, each line ending in a newline.

        Returns True when the file was written; with no filename or an unwritable
        file nothing happens and False is returned.
        """
        if self.filename is None:
            return False
        try:
            with open(self.filename, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as fh:
                fh.writelines(f"{line}\n" for line in self.buffer)
        except OSError:
            return False
        self.status_msg = "File saved"
        return True