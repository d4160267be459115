"""
Inter-onset interval voting.

Pure functions: onset timestamps in, BPM vote tally out. Each plausible
interval casts one vote for its tempo after octave folding into the
canonical 60-180 BPM range.
"""

import math

MIN_BPM = 60
MAX_BPM = 180

# Intervals outside (MIN_INTERVAL, MAX_INTERVAL] are treated as noise:
# faster than 600 BPM or slower than 30 BPM.
MIN_INTERVAL = 0.1
MAX_INTERVAL = 2.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def fold_bpm(
    bpm: float,
    low: int = MIN_BPM,
    high: int = MAX_BPM,
) -> int | None:
    """
    Fold a BPM value into [low, high] by doubling or halving.

    Raw intervals are ambiguous by a factor of two: a half-time or
    double-time reading of the same pulse is equally plausible. Folding
    trades that distinction away for a stable canonical tempo.

    Args:
        bpm: Raw BPM value. Must be positive.
        low: Lower bound of the target range (inclusive).
        high: Upper bound of the target range (inclusive).

    Returns:
        The folded BPM rounded to an integer, or None when the result
        still falls outside the range (or bpm is not positive).
    """
    if bpm <= 0:
        return None

    folded = float(bpm)
    while folded < low:
        folded *= 2
    while folded > high:
        folded /= 2
    folded = round_half_up(folded)

    if low <= folded <= high:
        return folded
    return None


def onset_intervals(onsets: list[float]) -> list[float]:
    """Elapsed time between each pair of consecutive onsets."""
    return [onsets[i] - onsets[i - 1] for i in range(1, len(onsets))]


def vote_intervals(
    onsets: list[float],
    *,
    min_interval: float = MIN_INTERVAL,
    max_interval: float = MAX_INTERVAL,
    low: int = MIN_BPM,
    high: int = MAX_BPM,
) -> dict[int, int]:
    """
    Tally one vote per plausible inter-onset interval.

    Args:
        onsets: Onset times in seconds, strictly increasing.
        min_interval: Intervals at or below this are discarded.
        max_interval: Intervals above this are discarded.
        low: Lower bound of the folding range.
        high: Upper bound of the folding range.

    Returns:
        Mapping of folded integer BPM -> vote count, keys in ascending order.
        Empty when no interval survives filtering.
    """
    votes: dict[int, int] = {}

    for interval in onset_intervals(onsets):
        if interval <= min_interval or interval > max_interval:
            continue
        raw_bpm = round_half_up(60.0 / interval)
        folded = fold_bpm(raw_bpm, low, high)
        if folded is not None:
            votes[folded] = votes.get(folded, 0) + 1

    return dict(sorted(votes.items()))
