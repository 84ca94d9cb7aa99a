# tinyvi

A small modal text editor for the terminal, in the spirit of vi. It has a
normal mode for moving around and an insert mode for typing. Line numbers
appear in a gutter on the left, and a status line at the bottom shows the
current mode, the cursor position (line:column, counted from 1) and, after a
save, the message `File saved`.

It draws with the standard library's `curses` module and needs no other
packages.

## Installing

```
pip install .
```

## Running

```
tinyvi notes.txt
```

If the file can be read, it is loaded as UTF-8. If it does not exist, the
editor starts with one empty line, and saving creates the file. When you start
`tinyvi` with no file name you can still edit, but `s` does nothing.

The buffer holds at most 10000 lines, and a line holds at most 9999
characters; longer files are cut when loaded.

## Keys

Normal mode (the mode the editor starts in):

| Key | Action                                  |
|-----|-----------------------------------------|
| `h` | move left                               |
| `l` | move right (stops on the last character)|
| `j` | move down                               |
| `k` | move up                                 |
| `w` | move to the next word, or the next line |
| `b` | move back to the start of a word        |
| `i` | switch to insert mode                   |
| `s` | save the file                           |
| `q` | quit                                    |

Insert mode:

| Key         | Action                                            |
|-------------|---------------------------------------------------|
| printable   | insert the character at the cursor (ASCII 32 to 126) |
| Enter       | split the line at the cursor                      |
| Backspace   | delete the character before the cursor, or join the line with the one above |
| Esc         | return to normal mode                             |

Backspace is the key that curses reports as `KEY_BACKSPACE`; other keys,
including arrow keys, are ignored.

## Things to know

- `q` quits at once, without asking and without saving.
- Saving writes every line followed by a newline. A file that already ended in
  a newline is loaded with an empty last line, so each load and save adds one
  more empty line at the end.
- There is no undo, search, or command line (`:`), and no way to open another
  file from inside the editor.

## Using it from Python

The editing logic works without a terminal:

```python
from tinyvi.state import EditorState
from tinyvi.keys import handle_input

state = EditorState.from_file("notes.txt")
handle_input(state, ord("i"), 24, 80)
for ch in "hello":
    handle_input(state, ord(ch), 24, 80)
handle_input(state, 27, 24, 80)  # Esc
state.save()  # True when the file was written
```

The last two arguments to `handle_input` are the height and width of the
screen, in lines and columns. They are used to keep the cursor in view by
updating `scroll_offset_row` and `scroll_offset_col`.

Other pieces:

- `tinyvi.state.EditorState` holds the lines (`buffer`), the cursor (`row`,
  `col`), the `mode` (an `EditorMode`), the file name and the status message.
  It has `insert_char`, `delete_char`, `split_line`, `merge_line`, `save`,
  `total_lines` and `status_line`.
- `tinyvi.navigation` has `move_left`, `move_right`, `move_up`, `move_down`,
  `move_word_forward` and `move_word_backward`.
- `tinyvi.display` has `adjust_scroll`, `render_lines` (the screen rows as
  text, with line numbers) and `cursor_position`, plus the curses `Display`.
- `tinyvi.app.run(stdscr, state)` runs the editor loop on a curses screen;
  `tinyvi.app.main()` is the `tinyvi` command.