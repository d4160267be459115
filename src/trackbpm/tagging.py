"""
Upload tagging: decode a track and derive its tempo and playback gain.

Owns everything around the engine: file decoding, user-facing messages,
and running the synchronous analysis off the event loop for async callers.
"""

import asyncio
import logging

from trackbpm.analyze import analyze_detailed
from trackbpm.perception.decode import MAX_SECONDS, load_audio
from trackbpm.precision.loudness import compute_gain
from trackbpm.types import TrackTags

logger = logging.getLogger(__name__)

TEMPO_NOT_DETECTED = "Tempo not detected, please enter manually"


def tag_samples(samples, sample_rate: int) -> TrackTags:
    """
    Build track tags from an already-decoded mono buffer.

    Args:
        samples: Mono float samples.
        sample_rate: Sample rate in Hz.

    Returns:
        TrackTags with bpm (0 if undetermined), gain_db, and a message
        when the user has to fill in the tempo themselves.
    """
    analysis = analyze_detailed(samples, sample_rate)
    loudness = compute_gain(samples)

    message = None
    if not analysis.detected:
        message = TEMPO_NOT_DETECTED

    return TrackTags(
        bpm=analysis.bpm,
        gain_db=loudness.gain_db,
        message=message,
        analysis=analysis,
    )


def tag_track(audio_path: str, max_seconds: float | None = MAX_SECONDS) -> TrackTags:
    """
    Decode an audio file and tag it with tempo and playback gain.

    Args:
        audio_path: Path to audio file.
        max_seconds: Only the first max_seconds are analyzed.

    Returns:
        TrackTags for the file.

    Raises:
        DecodeError: If the file cannot be decoded. The engine never runs
            on malformed audio.
    """
    audio = load_audio(audio_path, max_seconds=max_seconds)
    if audio.truncated:
        logger.info("analyzing first %.0fs of %s", max_seconds, audio_path)

    tags = tag_samples(audio.samples, audio.sample_rate)
    logger.info("%s: %d BPM, gain %.1f dB", audio_path, tags.bpm, tags.gain_db)
    return tags


async def tag_track_async(audio_path: str, max_seconds: float | None = MAX_SECONDS) -> TrackTags:
    """
    Async wrapper around tag_track for upload handlers.

    Decoding and analysis run in a worker thread. Once started they run to
    completion; cancelling the awaiting task only discards the result.
    """
    return await asyncio.to_thread(tag_track, audio_path, max_seconds)
