"""
Short-time energy of a mono sample buffer.

Pure function: samples in, one mean-squared amplitude per ~23 ms window out.
A buffer too short for the onset lookback is not an error here; it simply
yields too few windows and surfaces downstream as "undetermined".
"""

import numpy as np

WINDOW_SEC = 0.023


def window_length(sample_rate: int, window_sec: float = WINDOW_SEC) -> int:
    """
    Number of samples per energy window, rounded half up.

    Returns 0 for a non-positive sample rate, which downstream stages treat
    the same as an empty buffer.
    """
    if sample_rate <= 0:
        return 0
    return int(np.floor(sample_rate * window_sec + 0.5))


def windowed_energy(
    samples,
    sample_rate: int,
    *,
    window_sec: float = WINDOW_SEC,
) -> tuple[np.ndarray, int]:
    """
    Split samples into consecutive, non-overlapping windows and compute energy.

    Energy of a window is sum(sample²) / window_length. A trailing partial
    window is dropped. The input is never modified.

    Args:
        samples: Mono float samples (sequence or ndarray).
        sample_rate: Sample rate in Hz.
        window_sec: Window duration in seconds.

    Returns:
        (energies, window_length) tuple. energies is empty when the buffer
        holds no complete window or the sample rate is invalid.
    """
    n_samples = window_length(sample_rate, window_sec)
    data = np.asarray(samples, dtype=np.float64)
    if n_samples <= 0 or data.ndim != 1 or len(data) < n_samples:
        return np.zeros(0), n_samples

    n_windows = len(data) // n_samples
    frames = data[: n_windows * n_samples].reshape(n_windows, n_samples)
    energies = np.sum(frames * frames, axis=1) / n_samples
    return energies, n_samples
