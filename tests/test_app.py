import json
import subprocess
from unittest.mock import patch

import pytest

from emojipick.app import (
    Category,
    Page,
    PickerState,
    load_categories,
    paste_emoji,
)
from emojipick.emojis import Emoji

FILES = {
    "smile_and_faces.json": [
        {"symbol": "😀", "name": "grinning face"},
        {"symbol": "😺", "name": "grinning cat"},
    ],
    "people_and_body.json": [{"symbol": "👋", "name": "waving hand"}],
    "food_and_drink.json": [{"symbol": "🍎", "name": "red apple"}],
    "animals_and_nature.json": [{"symbol": "🐈", "name": "cat"}],
    "travel_and_places.json": [{"symbol": "🚗", "name": "cat car"}],
}


@pytest.fixture
def data_dir(tmp_path):
    for name, records in FILES.items():
        (tmp_path / name).write_text(json.dumps(records), encoding="utf-8")
    return tmp_path


@pytest.fixture
def state(data_dir):
    return PickerState(load_categories(data_dir))


def test_load_categories_titles_in_order(data_dir):
    titles = [category.title for category in load_categories(data_dir)]
    assert titles == [
        "Smile and Faces",
        "People and Body",
        "Food and Drinks",
        "Animals and Nature",
        "Travel and Places",
    ]


def test_load_categories_contents(data_dir):
    categories = load_categories(data_dir)
    assert categories[0].emojis == (
        Emoji("😀", "grinning face"),
        Emoji("😺", "grinning cat"),
    )
    assert [c.searchable for c in categories] == [True, False, True, True, False]


def test_load_categories_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_categories(tmp_path)


def test_load_categories_malformed(data_dir):
    (data_dir / "food_and_drink.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_categories(data_dir)


def test_initial_state(state):
    assert state.page is Page.EMOJI_LIST
    assert state.search_text == ""
    assert state.results == []


def test_page_names_follow_search(state):
    assert state.page.value == "emoji_list"
    state.set_search("apple")
    assert state.page.value == "search_results"
    state.set_search("")
    assert state.page.value == "emoji_list"


def test_set_search_switches_page_and_filters(state):
    state.set_search("cat")
    assert state.page is Page.SEARCH_RESULTS
    assert state.search_text == "cat"
    assert state.results == [Emoji("😺", "grinning cat"), Emoji("🐈", "cat")]


def test_search_skips_unsearchable_categories(state):
    state.set_search("wav")
    assert state.results == []
    state.set_search("cat car")
    assert state.results == []


def test_clearing_search_returns_to_list(state):
    state.set_search("cat")
    state.set_search("")
    assert state.page is Page.EMOJI_LIST
    assert len(state.results) == 4


def test_search_is_case_sensitive(state):
    state.set_search("Cat")
    assert state.results == []


def test_escape_requests_quit(state):
    assert state.handle_key("Escape", False) is True
    assert state.handle_key("Escape", True) is True


@pytest.mark.parametrize("key", ["Up", "Down", "Left", "Right"])
def test_arrow_keys_leave_search_alone(state, key):
    assert state.handle_key(key, False) is False
    assert state.search_text == ""
    assert state.page is Page.EMOJI_LIST


def test_typing_when_unfocused_appends(state):
    assert state.handle_key("c", False) is False
    assert state.handle_key("a", False) is False
    assert state.search_text == "ca"
    assert state.page is Page.SEARCH_RESULTS
    assert Emoji("🐈", "cat") in state.results


def test_typing_when_focused_is_left_to_entry(state):
    assert state.handle_key("c", True) is False
    assert state.search_text == ""


def test_non_character_key_is_ignored(state):
    assert state.handle_key("Shift_L", False) is False
    assert state.search_text == ""


def test_category_defaults_searchable():
    category = Category("Smile and Faces", (Emoji("😀", "grinning face"),))
    assert category.searchable is True


def test_paste_emoji_sets_clipboard_and_runs_command(capsys):
    copied = []
    with patch("emojipick.app.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(
            ["xdotool", "key", "ctrl+shift+v"], 0
        )
        status = paste_emoji("😀", copied.append)
    assert status == 0
    assert copied == ["😀"]
    assert run.call_args.args[0] == ["xdotool", "key", "ctrl+shift+v"]
    assert capsys.readouterr().out == "You clicked 😀\n"


def test_paste_emoji_without_clipboard():
    with patch("emojipick.app.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(
            ["xdotool", "key", "ctrl+shift+v"], 1
        )
        assert paste_emoji("🍎", None) == 1
    assert run.call_count == 1


def test_paste_emoji_missing_command_raises():
    with patch("emojipick.app.subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(FileNotFoundError):
            paste_emoji("🐈", None)