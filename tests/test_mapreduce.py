from patternkit.mapreduce import map_str_to_int, map_str_to_str, reduce

NAMES = ["Hao", "Chen", "MegaEase"]


def test_map_to_upper():
    assert map_str_to_str(NAMES, str.upper) == ["HAO", "CHEN", "MEGAEASE"]


def test_map_preserves_length_and_order():
    result = map_str_to_str(NAMES, lambda s: s)
    assert result == NAMES
    assert result is not NAMES


def test_map_to_int_lengths_match_items():
    lengths = map_str_to_int(NAMES, len)
    assert lengths == [len(name) for name in NAMES]


def test_reduce_matches_sum_of_mapping():
    assert reduce(NAMES, len) == sum(map_str_to_int(NAMES, len))


def test_empty_inputs():
    assert map_str_to_str([], str.upper) == []
    assert map_str_to_int([], len) == []
    assert reduce([], len) == 0