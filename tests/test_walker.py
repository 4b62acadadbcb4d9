from pathlib import Path

import pytest

from nssh.errors import EmptyListError, EndOfListError, ListNotFoundError, StaleCursorError
from nssh.lists.cursor import CursorStore
from nssh.lists.entries import ListStore
from nssh.lists.walker import ListWalker

LIST = "machines.test"


def _walker(tmp_path: Path, content: str, *, skip_disabled: bool = False) -> ListWalker:
    dsh = tmp_path / ".dsh"
    dsh.mkdir()
    (dsh / LIST).write_text(content, encoding="utf-8")
    return ListWalker(ListStore(dsh), CursorStore(tmp_path / ".nssh-last"), skip_disabled=skip_disabled)


def test_first_call_returns_first_entry(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\nb\nc\n")
    assert walker.resolve_next(LIST).host == "a"


def test_resolve_does_not_persist(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\nb\nc\n")
    walker.resolve_next(LIST)
    assert walker.cursor.read() is None


def test_cursor_advances(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\nb\nc\n")
    walker.save("a")
    assert walker.resolve_next(LIST).host == "b"


def test_full_walk_then_end_of_list(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\nb\nc\n")
    seen = []
    for _ in range(3):
        entry = walker.resolve_next(LIST)
        walker.save(entry.host)
        seen.append(entry.host)
    assert seen == ["a", "b", "c"]
    with pytest.raises(EndOfListError):
        walker.resolve_next(LIST)


def test_last_entry_followed_by_blank_lines_is_end(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\nb\nc\n\n# trailing note\n")
    walker.save("c")
    with pytest.raises(EndOfListError):
        walker.resolve_next(LIST)


def test_blank_lines_are_skipped(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "\n# header\na\n\n\nb # second\n")
    assert walker.resolve_next(LIST).host == "a"
    walker.save("a")
    entry = walker.resolve_next(LIST)
    assert entry.host == "b"
    assert entry.comment == "second"


def test_stale_cursor_raises(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\nb\nc\n")
    walker.save("zzz")
    with pytest.raises(StaleCursorError):
        walker.resolve_next(LIST)


def test_reset_restarts_walk(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\nb\nc\n")
    walker.save("b")
    walker.reset(LIST)
    assert walker.resolve_next(LIST).host == "a"


def test_reset_without_cursor_is_fine(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\n")
    walker.reset(LIST)
    walker.reset()


def test_empty_list_raises(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "\n# nothing here\n")
    with pytest.raises(EmptyListError):
        walker.resolve_next(LIST)


def test_missing_list_raises(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\n")
    with pytest.raises(ListNotFoundError):
        walker.resolve_next("machines.other")


def test_disabled_entries_are_selectable_by_default(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\n#b # down\nc\n")
    walker.save("a")
    entry = walker.resolve_next(LIST)
    assert entry.host == "b"
    assert entry.disabled
    assert entry.comment == "[DOWN] down"


def test_skip_disabled_excludes_entries(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "#a\nb\n#c\n", skip_disabled=True)
    assert walker.resolve_next(LIST).host == "b"
    walker.save("b")
    with pytest.raises(EndOfListError):
        walker.resolve_next(LIST)


def test_cursor_on_disabled_entry_still_advances(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\n#b\nc\n", skip_disabled=True)
    walker.save("b")
    assert walker.resolve_next(LIST).host == "c"


def test_escaped_hash_host_walks_past_itself(tmp_path: Path) -> None:
    walker = _walker(tmp_path, "a\\#b\nc\n")
    entry = walker.resolve_next(LIST)
    assert entry.host == "a#b"
    walker.save(entry.host)
    assert walker.resolve_next(LIST).host == "c"
