"""
Onset detection from a short-time energy sequence.

An onset is a window whose energy spikes above the mean of the preceding
LOOKBACK windows (~1 second at 23 ms windows) and is a strict local peak.
"""

import numpy as np

LOOKBACK = 43
SPIKE_RATIO = 1.5

# Fewer onsets than this leaves too few intervals to vote on.
MIN_ONSETS = 4


def has_lookback(energies: np.ndarray, lookback: int = LOOKBACK) -> bool:
    """True when at least one window has a full lookback and a right neighbour."""
    return len(energies) >= lookback + 2


def trailing_average(energies: np.ndarray, lookback: int = LOOKBACK) -> np.ndarray:
    """
    Mean of the ``lookback`` values preceding each index.

    Returns an array aligned with ``energies`` where entry i is
    mean(energies[i - lookback:i]). Entries with i < lookback are NaN.
    """
    averages = np.full(len(energies), np.nan)
    if len(energies) <= lookback:
        return averages
    csum = np.concatenate(([0.0], np.cumsum(energies)))
    idx = np.arange(lookback, len(energies))
    averages[lookback:] = (csum[idx] - csum[idx - lookback]) / lookback
    return averages


def detect_onsets(
    energies: np.ndarray,
    window_length: int,
    sample_rate: int,
    *,
    lookback: int = LOOKBACK,
    spike_ratio: float = SPIKE_RATIO,
) -> list[float]:
    """
    Find energy spikes and return their timestamps.

    Index i (i >= lookback, i + 1 in range) is an onset when all hold:
        energies[i] > spike_ratio * mean(energies[i - lookback:i])
        energies[i] > energies[i - 1]
        energies[i] > energies[i + 1]

    Args:
        energies: Per-window energy from windowed_energy().
        window_length: Samples per window.
        sample_rate: Sample rate in Hz.
        lookback: Number of trailing windows in the local average.
        spike_ratio: Multiple of the local average an onset must exceed.

    Returns:
        Onset times in seconds, strictly increasing. Empty when the
        sequence is too short for the lookback.
    """
    energies = np.asarray(energies, dtype=np.float64)
    if sample_rate <= 0 or window_length <= 0 or not has_lookback(energies, lookback):
        return []

    averages = trailing_average(energies, lookback)
    idx = np.arange(lookback, len(energies) - 1)
    current = energies[idx]
    is_onset = (
        (current > spike_ratio * averages[idx])
        & (current > energies[idx - 1])
        & (current > energies[idx + 1])
    )

    return [float(i * window_length) / sample_rate for i in idx[is_onset]]
