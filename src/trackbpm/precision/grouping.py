"""
Bucket BPM votes and pick the plurality winner.

Neighbouring integer BPMs split votes because onset times are quantized to
~23 ms windows. Summing votes into 2-BPM buckets absorbs that ±1 BPM jitter.

Both the bucket width and the tie-break order are tuning choices, fixed
here for reproducibility:
    - buckets are round(bpm / BUCKET_WIDTH) * BUCKET_WIDTH, rounded half up
    - ties go to the lowest bucket (ascending scan, first maximum kept)
"""

from trackbpm.precision.voting import round_half_up
from trackbpm.types import UNDETERMINED_BPM

BUCKET_WIDTH = 2


def bucket_for(bpm: int, width: int = BUCKET_WIDTH) -> int:
    """Bucket a BPM value belongs to (nearest multiple of width, half up)."""
    return round_half_up(bpm / width) * width


def group_votes(votes: dict[int, int], width: int = BUCKET_WIDTH) -> dict[int, int]:
    """
    Sum votes into width-BPM buckets.

    Args:
        votes: Folded BPM -> vote count.
        width: Bucket width in BPM.

    Returns:
        Bucket -> summed votes, keys in ascending order.
    """
    groups: dict[int, int] = {}
    for bpm in sorted(votes):
        key = bucket_for(bpm, width)
        groups[key] = groups.get(key, 0) + votes[bpm]
    return dict(sorted(groups.items()))


def resolve(groups: dict[int, int]) -> int:
    """
    Pick the bucket with the most votes.

    Buckets are scanned in ascending order and only a strictly larger count
    replaces the current best, so ties resolve to the lowest bucket.

    Returns:
        Winning bucket, or UNDETERMINED_BPM when there are no votes.
    """
    best_bpm = UNDETERMINED_BPM
    best_votes = 0
    for bpm in sorted(groups):
        if groups[bpm] > best_votes:
            best_bpm = bpm
            best_votes = groups[bpm]
    return best_bpm
