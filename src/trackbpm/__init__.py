"""
trackbpm: Estimate the tempo of uploaded tracks.

Usage:
    from trackbpm import analyze
    bpm = analyze(samples, 44100)  # 0 means undetermined

From a file (requires the audio extra):
    from trackbpm.tagging import tag_track
    tags = tag_track("path/to/track.mp3")
    print(tags.bpm, tags.gain_db)
"""

__version__ = "0.1.0"

from trackbpm.types import (
    UNDETERMINED_BPM,
    DecodedAudio,
    LoudnessResult,
    TempoAnalysis,
    TrackTags,
)
from trackbpm.analyze import analyze, analyze_detailed

__all__ = [
    "analyze",
    "analyze_detailed",
    "UNDETERMINED_BPM",
    "DecodedAudio",
    "LoudnessResult",
    "TempoAnalysis",
    "TrackTags",
]
