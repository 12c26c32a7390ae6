from gamemanager.registry import insertion_sort_desc, stable_sort_desc, take_top


def _pairs():
    return [("a", 5), ("b", 9), ("c", 5), ("d", 1), ("e", 9)]


def test_insertion_sort_is_descending_and_stable():
    ranked = insertion_sort_desc(_pairs(), key=lambda pair: pair[1])
    assert [name for name, _ in ranked] == ["b", "e", "a", "c", "d"]


def test_insertion_sort_leaves_input_untouched():
    items = _pairs()
    insertion_sort_desc(items, key=lambda pair: pair[1])
    assert items == _pairs()


def test_library_sort_matches_insertion_sort():
    key = lambda pair: pair[1]  # noqa: E731
    assert stable_sort_desc(_pairs(), key=key) == insertion_sort_desc(_pairs(), key=key)


def test_insertion_sort_handles_empty_and_single():
    assert insertion_sort_desc([], key=lambda x: x) == []
    assert insertion_sort_desc([3], key=lambda x: x) == [3]


def test_take_top_clamps():
    items = [1, 2, 3]
    assert take_top(items, None) == [1, 2, 3]
    assert take_top(items, 0) == []
    assert take_top(items, -5) == []
    assert take_top(items, 2) == [1, 2]
    assert take_top(items, 1000) == [1, 2, 3]
