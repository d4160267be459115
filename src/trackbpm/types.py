"""
Data types for track tempo tagging.

This module defines all shared types. It has no dependencies beyond
the standard library and numpy.
"""

from dataclasses import dataclass, field

import numpy as np


# Sentinel BPM meaning "tempo could not be determined". Disjoint from any
# genuine estimate, which always lies in [60, 180].
UNDETERMINED_BPM = 0


@dataclass
class TempoAnalysis:
    """
    Intermediate stages of one tempo analysis run.

    analyze() only returns ``bpm``; this is the diagnostic view used by the
    CLI and tests. Nothing here is shared across calls.
    """
    bpm: int                      # Final estimate, or UNDETERMINED_BPM
    sample_rate: int
    window_length: int            # Samples per energy window (~23 ms)
    energy_windows: int           # Number of complete windows analyzed
    onsets: list[float] = field(default_factory=list)  # Seconds, strictly increasing
    votes: dict[int, int] = field(default_factory=dict)   # Folded BPM -> votes
    groups: dict[int, int] = field(default_factory=dict)  # 2-BPM bucket -> votes

    @property
    def detected(self) -> bool:
        return self.bpm != UNDETERMINED_BPM


@dataclass
class LoudnessResult:
    """RMS loudness of a buffer and the gain needed to reach the playback target."""
    rms_db: float   # dBFS, floored at -180 for silence
    gain_db: float  # Clamped playback gain adjustment


@dataclass
class DecodedAudio:
    """
    A bounded, single-channel PCM buffer produced by the decoding layer.

    The engine borrows ``samples`` read-only.
    """
    samples: np.ndarray   # (N,) float32, mono
    sample_rate: int      # Hz
    duration: float       # Seconds actually decoded
    truncated: bool       # True when the source was longer than the decode limit


@dataclass
class TrackTags:
    """
    Metadata the upload pipeline persists for a track.

    ``message`` is set when the user needs to act on a result (e.g. tempo
    was not detected and must be entered manually).
    """
    bpm: int
    gain_db: float
    message: str | None = None
    analysis: TempoAnalysis | None = None
