from pathlib import Path

import pytest

from userlist_api.app.core.config import get_names_path
from userlist_api.app.services.name_loader import InitializationError, NameStore, load


def test_load_strips_and_drops_blank_lines(tmp_path: Path):
    src = tmp_path / "names.txt"
    src.write_text("  Alice \n\nAdam\n   \n\tBob\nCarl", encoding="utf-8")
    store = load(src)
    assert isinstance(store, NameStore)
    assert list(store) == ["Alice", "Adam", "Bob", "Carl"]
    assert store.total_count == 4
    assert len(store) == 4


def test_load_accepts_string_path(tmp_path: Path):
    src = tmp_path / "names.txt"
    src.write_text("Zoe\n", encoding="utf-8")
    assert list(load(str(src))) == ["Zoe"]


def test_load_from_lines_preserves_order():
    store = load(["Carl\n", "Bob\n", "Alice\n"])
    assert store.names == ("Carl", "Bob", "Alice")
    assert store[1] == "Bob"


def test_load_empty_source():
    store = load([])
    assert store.total_count == 0


def test_store_is_immutable():
    store = load(["Alice"])
    with pytest.raises(AttributeError):
        store.names = ("Mallory",)  # type: ignore[misc]


def test_missing_file_raises_initialization_error(tmp_path: Path):
    with pytest.raises(InitializationError) as info:
        load(tmp_path / "missing.txt")
    assert isinstance(info.value.__cause__, OSError)


def test_undecodable_file_raises_initialization_error(tmp_path: Path):
    src = tmp_path / "names.txt"
    src.write_bytes(b"\xff\xfe\xfa\n")
    with pytest.raises(InitializationError):
        load(src)


def test_bundled_names_file_loads():
    store = load(get_names_path())
    assert store.total_count > 0
    firsts = [name[0].upper() for name in store]
    assert firsts == sorted(firsts)
