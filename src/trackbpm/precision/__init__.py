from trackbpm.precision.energy import window_length, windowed_energy
from trackbpm.precision.onsets import detect_onsets
from trackbpm.precision.voting import fold_bpm, vote_intervals
from trackbpm.precision.grouping import group_votes, resolve
from trackbpm.precision.loudness import compute_gain, db_to_linear

__all__ = [
    "window_length",
    "windowed_energy",
    "detect_onsets",
    "fold_bpm",
    "vote_intervals",
    "group_votes",
    "resolve",
    "compute_gain",
    "db_to_linear",
]
