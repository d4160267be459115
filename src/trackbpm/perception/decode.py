"""
Audio decoding for the tagging pipeline.

Thin wrapper around librosa. Turns an uploaded file into the
bounded mono PCM buffer the precision layer expects. Container and codec
failures are reported here, before any analysis runs.
"""

import numpy as np

from trackbpm.types import DecodedAudio

# Only the opening minute is analyzed; enough for a stable vote on a
# typical track while keeping decode time low.
MAX_SECONDS = 60.0


class DecodeError(Exception):
    """Raised when an audio file cannot be decoded into samples."""


def _require_librosa():
    try:
        import librosa
    except ImportError:
        raise ImportError(
            "librosa is required to decode audio files. "
            "Install with: pip install -e '.[audio]'"
        )
    return librosa


def load_audio(
    audio_path: str,
    *,
    max_seconds: float | None = MAX_SECONDS,
    sample_rate: int | None = None,
) -> DecodedAudio:
    """
    Decode an audio file into a mono float32 buffer.

    Multi-channel sources are downmixed to mono.

    Args:
        audio_path: Path to audio file (wav, mp3, flac, aif, etc.)
        max_seconds: Decode at most this many seconds from the start.
            None decodes the whole file.
        sample_rate: Resample to this rate. None keeps the native rate.

    Returns:
        DecodedAudio with samples, sample rate, and whether the source
        was cut at max_seconds.

    Raises:
        DecodeError: If the file is missing, unreadable, or holds no audio.
    """
    librosa = _require_librosa()

    try:
        y, sr = librosa.load(audio_path, sr=sample_rate, mono=True, duration=max_seconds)
    except Exception as err:
        raise DecodeError(f"could not decode {audio_path}: {err}") from err

    samples = np.asarray(y, dtype=np.float32)
    if samples.size == 0:
        raise DecodeError(f"no audio samples in {audio_path}")

    duration = len(samples) / sr
    truncated = False
    if max_seconds is not None:
        try:
            truncated = librosa.get_duration(path=audio_path) > max_seconds
        except Exception:
            # Length probe is informational; the decoded buffer is still valid
            truncated = duration >= max_seconds

    return DecodedAudio(
        samples=samples,
        sample_rate=int(sr),
        duration=round(duration, 3),
        truncated=truncated,
    )
