import pytest

from secret_finder.errors import InsufficientShares
from secret_finder.models import Share
from secret_finder.selector import select


def _shares(*xs):
    return [Share(x=x, base=10, raw_value=str(x * 10)) for x in xs]


def test_select_lowest_x_first():
    shares = _shares(6, 2, 3, 1)
    chosen = select(shares, 3)
    assert [s.x for s in chosen] == [1, 2, 3]


def test_select_does_not_mutate_input():
    shares = _shares(3, 1, 2)
    select(shares, 2)
    assert [s.x for s in shares] == [3, 1, 2]


def test_select_accepts_any_iterable():
    chosen = select(iter(_shares(5, 4)), 2)
    assert [s.x for s in chosen] == [4, 5]


def test_select_exactly_k():
    assert len(select(_shares(1, 2, 3), 3)) == 3


def test_select_insufficient_shares():
    with pytest.raises(InsufficientShares):
        select(_shares(1, 2), 3)


@pytest.mark.parametrize("k", [0, -1])
def test_select_invalid_threshold(k):
    with pytest.raises(InsufficientShares):
        select(_shares(1, 2), k)
