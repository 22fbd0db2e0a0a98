from player_style.scoring.optional import fmap, fold, map2, present


def test_fmap() -> None:
    assert fmap(2, lambda v: v * 3) == 6
    assert fmap(None, lambda v: v * 3) is None


def test_map2() -> None:
    assert map2(2, 5, lambda a, b: a + b) == 7
    assert map2(None, 5, lambda a, b: a + b) is None
    assert map2(2, None, lambda a, b: a + b) is None


def test_fold_is_strict() -> None:
    assert fold([1, 2, 3], lambda acc, v: acc + v, 0) == 6
    assert fold([1, None, 3], lambda acc, v: acc + v, 0) is None


def test_present() -> None:
    assert present([None, 1, None, 2]) == [1, 2]
