"""Key handling for normal and insert mode."""

from __future__ import annotations

import curses

from . import navigation
from .display import adjust_scroll
from .state import EditorMode, EditorState

ESCAPE = 27
ENTER = ord("\n")
KEY_BACKSPACE = curses.KEY_BACKSPACE

_NORMAL_COMMANDS = {
    ord("h"): navigation.move_left,
    ord("l"): navigation.move_right,
    ord("j"): navigation.move_down,
    ord("k"): navigation.move_up,
    ord("w"): navigation.move_word_forward,
    ord("b"): navigation.move_word_backward,
    ord("s"): EditorState.save,
}


def normal_mode_handle(state: EditorState, ch: int, lines: int, cols: int) -> None:
    """Handle one key in normal mode."""
    if ch == ord("i"):
        state.mode = EditorMode.INSERT
        state.status_msg = None
    else:
        command = _NORMAL_COMMANDS.get(ch)
        if command is not None:
            command(state)
    adjust_scroll(state, lines, cols)


def insert_mode_handle(state: EditorState, ch: int, lines: int, cols: int) -> None:
    """Handle one key in insert mode."""
    if ch == ESCAPE:
        state.mode = EditorMode.NORMAL
    elif ch == KEY_BACKSPACE:
        if state.col > 0:
            state.delete_char()
        elif state.row > 0:
            state.merge_line()
    elif ch == ENTER:
        state.split_line()
    elif 32 <= ch <= 126:
        state.insert_char(chr(ch))
    adjust_scroll(state, lines, cols)


def handle_input(state: EditorState, ch: int, lines: int, cols: int) -> None:
    """Pass a key to the handler for the current mode."""
    if state.mode is EditorMode.NORMAL:
        normal_mode_handle(state, ch, lines, cols)
    else:
        insert_mode_handle(state, ch, lines, cols)