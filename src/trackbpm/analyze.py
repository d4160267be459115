"""
Tempo analysis pipeline.

Chains the precision stages into a single synchronous pass:

    samples -> windowed energy -> onsets -> interval votes -> buckets -> BPM

There are exactly two failure exits (buffer too short for the onset
lookback, fewer than MIN_ONSETS onsets) and both return UNDETERMINED_BPM.
Expected "no result" conditions never raise.
"""

import logging

from trackbpm.precision.energy import windowed_energy
from trackbpm.precision.grouping import group_votes, resolve
from trackbpm.precision.onsets import MIN_ONSETS, detect_onsets, has_lookback
from trackbpm.precision.voting import vote_intervals
from trackbpm.types import UNDETERMINED_BPM, TempoAnalysis

logger = logging.getLogger(__name__)


def analyze_detailed(samples, sample_rate: int) -> TempoAnalysis:
    """
    Estimate tempo and keep every intermediate stage.

    Args:
        samples: Mono float samples, borrowed read-only.
        sample_rate: Sample rate in Hz.

    Returns:
        TempoAnalysis. bpm is UNDETERMINED_BPM (0) when no tempo was found,
        otherwise an integer in [60, 180].
    """
    energies, n_window = windowed_energy(samples, sample_rate)
    result = TempoAnalysis(
        bpm=UNDETERMINED_BPM,
        sample_rate=sample_rate,
        window_length=n_window,
        energy_windows=len(energies),
    )

    # Empty buffers and invalid sample rates land here too
    if not has_lookback(energies):
        logger.debug("buffer too short for onset lookback (%d windows)", len(energies))
        return result

    result.onsets = detect_onsets(energies, n_window, sample_rate)
    if len(result.onsets) < MIN_ONSETS:
        logger.debug("only %d onsets detected, tempo undetermined", len(result.onsets))
        return result

    result.votes = vote_intervals(result.onsets)
    result.groups = group_votes(result.votes)
    result.bpm = resolve(result.groups)

    logger.debug(
        "detected %d BPM (%d onsets, %d votes)",
        result.bpm, len(result.onsets), sum(result.votes.values()),
    )
    return result


def analyze(samples, sample_rate: int) -> int:
    """
    Estimate the tempo of a mono sample buffer.

    This is the primary entry point for the package. Pure and synchronous:
    no I/O, no state carried between calls, the buffer is never modified.

    Args:
        samples: Mono float samples (sequence or ndarray).
        sample_rate: Sample rate in Hz.

    Returns:
        Integer BPM in [60, 180], or 0 when the tempo is undetermined.
    """
    return analyze_detailed(samples, sample_rate).bpm
