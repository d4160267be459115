"""Tests for BPM bucketing and plurality resolution."""

from trackbpm.precision.grouping import bucket_for, group_votes, resolve
from trackbpm.types import UNDETERMINED_BPM


def test_even_bpm_is_its_own_bucket():
    assert bucket_for(120) == 120
    assert bucket_for(60) == 60
    assert bucket_for(180) == 180


def test_odd_bpm_rounds_up():
    """119 / 2 = 59.5 → 60 → bucket 120."""
    assert bucket_for(119) == 120
    assert bucket_for(121) == 122
    assert bucket_for(179) == 180


def test_group_absorbs_jitter():
    votes = {119: 3, 120: 4, 124: 2}
    assert group_votes(votes) == {120: 7, 124: 2}


def test_group_preserves_total():
    votes = {61: 1, 62: 2, 99: 5, 100: 1, 171: 3}
    groups = group_votes(votes)
    assert sum(groups.values()) == sum(votes.values())
    assert list(groups) == sorted(groups)


def test_group_custom_width():
    assert group_votes({118: 1, 121: 1, 123: 1}, width=4) == {120: 2, 124: 1}


def test_resolve_plurality():
    assert resolve({100: 2, 120: 7, 140: 3}) == 120


def test_resolve_tie_goes_to_lowest_bucket():
    assert resolve({140: 5, 90: 5, 120: 2}) == 90


def test_resolve_order_independent():
    a = resolve({130: 4, 96: 4})
    b = resolve({96: 4, 130: 4})
    assert a == b == 96


def test_resolve_empty():
    assert resolve({}) == UNDETERMINED_BPM
