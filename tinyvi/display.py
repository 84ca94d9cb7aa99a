"""Screen layout and curses rendering."""

from __future__ import annotations

import curses

from .state import EditorState

LINE_NUMBER_WIDTH = 6
_ESCAPE_DELAY_MS = 25


def adjust_scroll(state: EditorState, lines: int, cols: int) -> None:
    """Scroll so that the cursor is visible on a screen of ``lines`` by ``cols``."""
    if state.row < state.scroll_offset_row:
        state.scroll_offset_row = state.row
    elif state.row >= state.scroll_offset_row + (lines - 1):
        state.scroll_offset_row = state.row - (lines - 2)

    text_width = cols - LINE_NUMBER_WIDTH
    if state.col < state.scroll_offset_col:
        state.scroll_offset_col = state.col
    elif state.col >= state.scroll_offset_col + text_width:
        state.scroll_offset_col = state.col - (text_width - 1)


def render_lines(state: EditorState, lines: int, cols: int) -> list[str]:
    """The text rows of the screen, line numbers included, without the status line.

    Rows past the end of the buffer are empty strings.
    """
    text_width = cols - LINE_NUMBER_WIDTH
    rows = []
    for screen_row in range(max(lines - 1, 0)):
        buffer_row = state.scroll_offset_row + screen_row
        if buffer_row >= state.total_lines:
            rows.append("")
            continue
        text = state.buffer[buffer_row][state.scroll_offset_col :]
        if text_width >= 0:
            text = text[:text_width]
        number = f"{buffer_row + 1:>{LINE_NUMBER_WIDTH - 1}} "
        rows.append(number + text)
    return rows


def cursor_position(state: EditorState, lines: int, cols: int) -> tuple[int, int] | None:
    """Screen position of the cursor, or None when it lies off the text area."""
    screen_row = state.row - state.scroll_offset_row
    screen_col = state.col - state.scroll_offset_col + LINE_NUMBER_WIDTH
    if 0 <= screen_row < lines - 1 and LINE_NUMBER_WIDTH <= screen_col < cols:
        return screen_row, screen_col
    return None


class Display:
    """A curses screen set up for the editor."""

    def __init__(self, stdscr):
        self._screen = stdscr
        curses.set_escdelay(_ESCAPE_DELAY_MS)
        curses.raw()
        stdscr.keypad(True)
        curses.noecho()
        stdscr.scrollok(True)

    def size(self) -> tuple[int, int]:
        """Screen height and width."""
        lines, cols = self._screen.getmaxyx()
        return lines, cols

    def _put(self, y: int, text: str) -> None:
        try:
            self._screen.addstr(y, 0, text)
        except curses.error:
            # Writing into the last screen cell moves the cursor off screen.
            pass

    def render(self, state: EditorState) -> None:
        """Draw the buffer, the status line and the cursor."""
        lines, cols = self.size()
        self._screen.clear()
        for y, text in enumerate(render_lines(state, lines, cols)):
            if text:
                self._put(y, text)
        self._put(lines - 1, state.status_line())
        position = cursor_position(state, lines, cols)
        if position is not None:
            self._screen.move(*position)
        self._screen.refresh()