"""
Playback loudness normalization gain.

Uses RMS level as a practical stand-in for LUFS: close enough for evening
out playback volume between uploads without a full ITU-R BS.1770 meter.
The resulting gain_db is stored with the track and applied at playback
as a linear multiplier (see db_to_linear).
"""

import numpy as np

from trackbpm.types import LoudnessResult

TARGET_DB = -14.0   # Streaming-platform reference level
MAX_GAIN_DB = 12.0  # Cap boost so quiet recordings don't distort
MIN_GAIN_DB = -12.0
SAMPLE_STRIDE = 4   # Every 4th sample is plenty for a level estimate

_SILENCE_FLOOR = 1e-9


def db_to_linear(db: float) -> float:
    """Convert a dB gain to a linear amplitude multiplier."""
    return float(10.0 ** (db / 20.0))


def linear_to_db(linear: float) -> float:
    """Convert a linear amplitude to dBFS, flooring silence at -180 dB."""
    return float(20.0 * np.log10(max(linear, _SILENCE_FLOOR)))


def compute_gain(
    samples,
    *,
    target_db: float = TARGET_DB,
    max_gain_db: float = MAX_GAIN_DB,
    min_gain_db: float = MIN_GAIN_DB,
    stride: int = SAMPLE_STRIDE,
) -> LoudnessResult:
    """
    Estimate the gain needed to bring a buffer to the target level.

    Args:
        samples: Mono float samples (sequence or ndarray).
        target_db: Desired RMS level in dBFS.
        max_gain_db: Largest boost returned.
        min_gain_db: Largest cut returned.
        stride: Take every stride-th sample for the RMS estimate.

    Returns:
        LoudnessResult. An empty buffer returns 0 dB gain (play as-is).
    """
    data = np.asarray(samples, dtype=np.float64).ravel()[:: max(1, stride)]
    if len(data) == 0:
        return LoudnessResult(rms_db=linear_to_db(0.0), gain_db=0.0)

    rms = float(np.sqrt(np.mean(data * data)))
    rms_db = linear_to_db(rms)
    gain_db = float(np.clip(target_db - rms_db, min_gain_db, max_gain_db))

    return LoudnessResult(rms_db=round(rms_db, 2), gain_db=round(gain_db, 2))
