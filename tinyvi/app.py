"""Entry point: open a file and run the editor loop."""

from __future__ import annotations

import curses
import sys

from .display import Display
from .keys import handle_input
from .state import EditorMode, EditorState

_QUIT = ord("q")


def run(stdscr, state: EditorState) -> None:
    """Draw, read a key and handle it until ``q`` is pressed in normal mode."""
    display = Display(stdscr)
    while True:
        display.render(state)
        ch = stdscr.getch()
        if ch == _QUIT and state.mode is EditorMode.NORMAL:
            break
        lines, cols = display.size()
        handle_input(state, ch, lines, cols)


def main(argv=None) -> int:
    """Start the editor on the file named by the first argument, if any."""
    args = sys.argv[1:] if argv is None else list(argv)
    filename = args[0] if args else None
    state = EditorState.from_file(filename)
    curses.wrapper(run, state)
    return 0