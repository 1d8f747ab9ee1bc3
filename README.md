# emojipick

A small emoji picker for the desktop. It opens a window with emojis laid
out by category, lets you search them by name, and when you pick one it
copies it to the clipboard, sends the paste keystroke to the window you
were working in, and closes.

## Requirements

- Python 3.10 or later with `tkinter` available (on some Linux
  distributions it is a separate system package).
- `xdotool` on your `PATH`: pasting is done by running
  `xdotool key ctrl+shift+v`.

## Installing

```
pip install .
```

## Emoji data

The package does not ship any emoji data. The picker reads five JSON
files from a data directory:

| Category           | File                      | Searchable |
|--------------------|---------------------------|------------|
| Smile and Faces    | `smile_and_faces.json`    | yes        |
| People and Body    | `people_and_body.json`    | no         |
| Food and Drinks    | `food_and_drink.json`     | yes        |
| Animals and Nature | `animals_and_nature.json` | yes        |
| Travel and Places  | `travel_and_places.json`  | no         |

All five files must be present. Each holds a JSON array of objects with a
`symbol` and a `name` string; other fields are ignored:

```json
[
  {"symbol": "😀", "name": "grinning face"},
  {"symbol": "😃", "name": "grinning face with big eyes"}
]
```

By default the directory looked in is `data/` inside the installed
`emojipick` package; since nothing is installed there, you will normally
point the picker at your own directory with `--data-dir`.

## Using the picker

```
emojipick --data-dir path/to/emoji-data
```

- The window is a fixed 493×400. Emojis are shown in grids of eight per
  row, one grid per category, under the category title.
- Typing a character while the search field does not have focus moves
  focus to it and appends the character. Arrow keys are left alone.
- As soon as the search text is not empty, the category view is replaced
  by the emojis whose name contains the search text. Matching is a
  case-sensitive substring test, and only the "Smile and Faces",
  "Food and Drinks" and "Animals and Nature" categories are searched.
  Clearing the search brings the categories back.
- Clicking an emoji hides the window, prints `You clicked <emoji>`, puts
  the emoji on the clipboard, runs the paste command, and closes the
  window 20 ms later.
- `Esc` closes the picker without choosing anything.

## Using it from Python

`emojipick.emojis` works without any window:

```python
from emojipick.emojis import EmojiIndex, grid_position, parse_emojis

emojis = parse_emojis('[{"symbol": "😀", "name": "grinning face"}]')
index = EmojiIndex(emojis)
matches = index.search("grin")   # [Emoji(symbol='😀', name='grinning face')]
position = grid_position(9)      # GridPosition(column=1, row=1, width=1, height=1)
```

- `Emoji` is a frozen dataclass with `symbol` and `name`.
- `parse_emojis(text)` parses the JSON format above and raises
  `ValueError` on malformed data; `load_emoji_file(path)` reads and parses
  a file.
- `search_emojis(emojis, text)` returns, in order, the emojis whose name
  contains `text`; `EmojiIndex` wraps a list of emojis with a `search`
  method, and supports `len()` and iteration.
- `grid_position(index, columns=8)` gives the `GridPosition` (row and
  column) of a button, filling each row left to right.

`emojipick.app` holds the picker itself:

- `load_categories(data_dir)` returns the five `Category` objects
  (`title`, `emojis`, `searchable`) from a data directory.
- `PickerState(categories)` keeps the search text, the visible `Page`
  (`EMOJI_LIST` or `SEARCH_RESULTS`) and the search results;
  `set_search(text)` updates them, and `handle_key(char, search_focused)`
  applies the key rules above, returning `True` when the picker should
  quit.
- `paste_emoji(symbol, set_clipboard)` prints the choice, calls
  `set_clipboard(symbol)` if given, runs the paste command and returns its
  exit status.
- `EmojiPickerWindow(root, state)` builds the window on a `tkinter` root;
  `main(argv=None)` is the `emojipick` command.

## What it does not do

- Pasting only works where `xdotool` does (an X11 session); the picker
  has no other way of sending the keystroke.
- The picker does not follow the desktop's light or dark theme setting,
  and it has no custom styling; it uses the default `tkinter` look.

## Running the tests

```
pip install ".[test]"
pytest
```