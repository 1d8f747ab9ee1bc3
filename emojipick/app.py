"""The emoji picker window: categories, search state, pasting and startup."""

from __future__ import annotations

import argparse
import subprocess
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any

from .emojis import Emoji, EmojiIndex, grid_position, load_emoji_file

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"
WINDOW_SIZE = (493, 400)
QUIT_DELAY_MS = 20
PASTE_COMMAND = ("xdotool", "key", "ctrl+shift+v")

# (title, file name, included in the search index)
_CATEGORY_FILES = (
    ("Smile and Faces", "smile_and_faces.json", True),
    ("People and Body", "people_and_body.json", False),
    ("Food and Drinks", "food_and_drink.json", True),
    ("Animals and Nature", "animals_and_nature.json", True),
    ("Travel and Places", "travel_and_places.json", False),
)

_ESCAPE = "Escape"
_ARROW_KEYS = frozenset({"Up", "Down", "Left", "Right"})


@dataclass(frozen=True)
class Category:
    """A titled group of emojis shown as one grid."""

    title: str
    emojis: tuple[Emoji, ...]
    searchable: bool = True


class Page(Enum):
    """The two pages of the picker."""

    EMOJI_LIST = "emoji_list"
    SEARCH_RESULTS = "search_results"


def load_categories(data_dir: str | PathLike[str]) -> list[Category]:
    """Load every emoji category from the JSON files in ``data_dir``."""
    directory = Path(data_dir)
    return [
        Category(title, tuple(load_emoji_file(directory / name)), searchable)
        for title, name, searchable in _CATEGORY_FILES
    ]


def paste_emoji(
    symbol: str, set_clipboard: Callable[[str], Any] | None
) -> int:
    """Put ``symbol`` on the clipboard and send the paste keystroke.

    Returns the exit status of the paste command. Raises OSError if the
    command cannot be started.
    """
    print(f"You clicked {symbol}")
    if set_clipboard is not None:
        set_clipboard(symbol)
    return subprocess.run(list(PASTE_COMMAND), check=False).returncode


@dataclass
class PickerState:
    """Search text, visible page and search results of the picker."""

    categories: list[Category]
    search_text: str = field(default="", init=False)
    page: Page = field(default=Page.EMOJI_LIST, init=False)
    results: list[Emoji] = field(default_factory=list, init=False)

    def __init__(self, categories: Iterable[Category]) -> None:
        self.categories = list(categories)
        self._index = EmojiIndex(
            emoji
            for category in self.categories
            if category.searchable
            for emoji in category.emojis
        )
        self.search_text = ""
        self.page = Page.EMOJI_LIST
        self.results = []

    def set_search(self, text: str) -> None:
        """Update the search text, the visible page and the results."""
        self.search_text = text
        self.page = Page.SEARCH_RESULTS if text else Page.EMOJI_LIST
        self.results = self._index.search(text)

    def handle_key(self, char: str, search_focused: bool) -> bool:
        """React to a key press; return True when the picker should quit.

        ``char`` is either a key name (``"Escape"``, ``"Up"`` ...) or the
        character the key produces. While the search field lacks focus, a
        printable character is appended to the search text.
        """
        if char == _ESCAPE:
            return True
        if char in _ARROW_KEYS or search_focused:
            return False
        if len(char) == 1 and char.isprintable():
            self.set_search(self.search_text + char)
        return False


def _scrollable(tk: Any, master: Any) -> tuple[Any, Any]:
    outer = tk.Frame(master)
    canvas = tk.Canvas(outer, highlightthickness=0)
    bar = tk.Scrollbar(outer, orient="vertical", command=canvas.yview)
    inner = tk.Frame(canvas)
    inner.bind(
        "<Configure>",
        lambda _event: canvas.configure(scrollregion=canvas.bbox("all")),
    )
    canvas.create_window((0, 0), window=inner, anchor="nw")
    canvas.configure(yscrollcommand=bar.set)
    canvas.pack(side="left", fill="both", expand=True)
    bar.pack(side="right", fill="y")
    return outer, inner


class EmojiPickerWindow:
    """The picker window: a search field over the emoji grids or the results."""

    def __init__(self, root: Any, state: PickerState) -> None:
        import tkinter as tk

        self._tk = tk
        self.root = root
        self.state = state

        root.title("Emoji Picker")
        width, height = WINDOW_SIZE
        root.geometry(f"{width}x{height}")
        root.resizable(False, False)

        self._search_var = tk.StringVar(master=root, value=state.search_text)
        self._entry = tk.Entry(root, textvariable=self._search_var)
        self._entry.pack(fill="x", padx=5, pady=5)

        list_outer, list_inner = _scrollable(tk, root)
        for category in state.categories:
            tk.Label(list_inner, text=category.title).pack(anchor="w", padx=5)
            grid = tk.Frame(list_inner)
            grid.pack(anchor="w", padx=5, pady=5)
            self._fill_grid(grid, category.emojis)

        results_outer, results_inner = _scrollable(tk, root)
        tk.Label(results_inner, text="Search Results").pack(anchor="w", padx=5)
        self._results_grid = tk.Frame(results_inner)
        self._results_grid.pack(anchor="w", padx=5, pady=5)

        self._pages = {
            Page.EMOJI_LIST: list_outer,
            Page.SEARCH_RESULTS: results_outer,
        }
        self._shown: Page | None = None
        self._show(state.page)

        self._search_var.trace_add("write", self._on_search_changed)
        root.bind("<Key>", self._on_key)

    def _fill_grid(self, grid: Any, emojis: Iterable[Emoji]) -> None:
        for index, emoji in enumerate(emojis):
            position = grid_position(index)
            button = self._tk.Button(
                grid,
                text=emoji.symbol,
                relief="flat",
                command=lambda chosen=emoji: self.choose(chosen),
            )
            button.grid(
                row=position.row,
                column=position.column,
                rowspan=position.height,
                columnspan=position.width,
                padx=7,
                pady=7,
            )

    def _show(self, page: Page) -> None:
        if page is self._shown:
            return
        if self._shown is not None:
            self._pages[self._shown].pack_forget()
        self._pages[page].pack(fill="both", expand=True, padx=5, pady=5)
        self._shown = page

    def _on_search_changed(self, *_args: Any) -> None:
        self.state.set_search(self._search_var.get())
        self._show(self.state.page)
        for child in self._results_grid.winfo_children():
            child.destroy()
        self._fill_grid(self._results_grid, self.state.results)

    def _on_key(self, event: Any) -> None:
        keysym = event.keysym
        if keysym == _ESCAPE or keysym in _ARROW_KEYS:
            key = keysym
        else:
            key = event.char or keysym
        focused = self.root.focus_get() is self._entry
        before = self.state.search_text
        if self.state.handle_key(key, focused):
            self.quit()
            return
        if focused or key in _ARROW_KEYS:
            return
        self._entry.focus_set()
        if self.state.search_text != before:
            self._search_var.set(self.state.search_text)
            self._entry.icursor("end")

    def _set_clipboard(self, text: str) -> None:
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
        self.root.update()

    def choose(self, emoji: Emoji) -> None:
        """Hide the window, paste ``emoji`` and quit shortly after."""
        self.root.withdraw()
        paste_emoji(emoji.symbol, self._set_clipboard)
        self.root.after(QUIT_DELAY_MS, self.quit)

    def quit(self) -> None:
        """Close the picker."""
        self.root.destroy()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the emoji picker."""
    parser = argparse.ArgumentParser(
        prog="emojipick", description="Pick an emoji and paste it."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="directory holding the emoji JSON files",
    )
    args = parser.parse_args(argv)

    state = PickerState(load_categories(args.data_dir))

    import tkinter as tk

    root = tk.Tk()
    EmojiPickerWindow(root, state)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())