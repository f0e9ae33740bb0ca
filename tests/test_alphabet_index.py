from userlist_api.app.services import alphabet_index
from userlist_api.app.services.name_loader import load


def _ranges(index):
    return {k: (b.count, b.start_index, b.end_index) for k, b in index.items()}


def test_build_sample_index():
    index = alphabet_index.build(load(["Alice", "Adam", "Bob", "Carl"]))
    assert _ranges(index) == {
        "A": (2, 0, 1),
        "B": (1, 2, 2),
        "C": (1, 3, 3),
    }


def test_build_is_case_insensitive():
    index = alphabet_index.build(load(["alice", "Adam", "bob"]))
    assert _ranges(index) == {"A": (2, 0, 1), "B": (1, 2, 2)}
    assert index["A"].letter == "A"


def test_build_single_name():
    index = alphabet_index.build(load(["Zoe"]))
    assert _ranges(index) == {"Z": (1, 0, 0)}


def test_build_empty_store():
    assert len(alphabet_index.build(load([]))) == 0


def test_index_is_read_only():
    index = alphabet_index.build(load(["Alice"]))
    try:
        index["B"] = index["A"]  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("index accepted a write")


def test_non_contiguous_letters_are_not_repaired():
    # The later run of "A" names replaces the first one; the store is
    # expected to be grouped before indexing.
    index = alphabet_index.build(load(["Alice", "Bob", "Adam"]))
    assert _ranges(index) == {"A": (1, 2, 2), "B": (1, 1, 1)}
