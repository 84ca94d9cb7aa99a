"""Cursor movement in normal mode."""

from __future__ import annotations

from .state import EditorState


def _char_at(line: str, index: int) -> str:
    return line[index] if 0 <= index < len(line) else ""


def move_left(state: EditorState) -> None:
    """Move the cursor one column left, stopping at the line start."""
    if state.col > 0:
        state.col -= 1


def move_right(state: EditorState) -> None:
    """Move the cursor one column right, stopping on the last character."""
    if state.col < len(state.buffer[state.row]) - 1:
        state.col += 1


def move_up(state: EditorState) -> None:
    """Move the cursor up a line, clamping the column to the line length."""
    if state.row > 0:
        state.row -= 1
        state.col = min(state.col, len(state.buffer[state.row]))


def move_down(state: EditorState) -> None:
    """Move the cursor down a line, clamping the column to the line length."""
    if state.row < state.total_lines - 1:
        state.row += 1
        state.col = min(state.col, len(state.buffer[state.row]))


def move_word_forward(state: EditorState) -> None:
    """Move to the start of the next word, or to the start of the next line."""
    line = state.buffer[state.row]
    length = len(line)
    col = state.col
    while col < length and line[col] != " ":
        col += 1
    while col < length and line[col] == " ":
        col += 1
    if col >= length:
        if state.row != state.total_lines - 1:
            state.row += 1
            state.col = 0
        return
    state.col = col


def move_word_backward(state: EditorState) -> None:
    """Move to the start of the current or previous word.

    At the start of a line the cursor goes to the start of the last word
    of the previous line.
    """
    if state.col == 0:
        if state.row == 0:
            return
        state.row -= 1
        previous = state.buffer[state.row]
        end = len(previous)
        while end > 0 and previous[end - 1] != " ":
            end -= 1
        state.col = end
        return

    line = state.buffer[state.row]
    col = state.col
    while col > 0 and _char_at(line, col - 1) != " ":
        col -= 1
    if _char_at(line, state.col - 1) == " ":
        while col > 0 and _char_at(line, col - 1) == " ":
            col -= 1
        while col > 0 and _char_at(line, col - 1) != " ":
            col -= 1
    state.col = col