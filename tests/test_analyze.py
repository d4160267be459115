"""Tests for the end-to-end tempo pipeline. Synthetic click trains, no audio files."""

import numpy as np
import pytest

from trackbpm import UNDETERMINED_BPM, analyze, analyze_detailed


def _click_train(bpm, seconds=10.0, sample_rate=44100, amplitude=0.8):
    """Single-sample impulses spaced exactly 60/bpm seconds apart."""
    samples = np.zeros(int(seconds * sample_rate))
    spacing = 60.0 / bpm * sample_rate
    n = 0
    while int(round(n * spacing)) < len(samples):
        samples[int(round(n * spacing))] = amplitude
        n += 1
    return samples


def _aligned_click_train(windows_per_beat, seconds=10.0, sample_rate=8000):
    """
    Clicks whose spacing is an exact number of 23 ms windows.

    At 8 kHz a window is exactly 184 samples, so every inter-onset
    interval is exactly windows_per_beat windows long.
    """
    samples = np.zeros(int(seconds * sample_rate))
    samples[:: windows_per_beat * 184] = 0.5
    return samples


# --- Click trains ---

@pytest.mark.parametrize("bpm", [75, 90, 100, 120])
def test_click_train_tempo(bpm):
    """A clean click train is recovered within ±2 BPM."""
    assert abs(analyze(_click_train(bpm), 44100) - bpm) <= 2


@pytest.mark.parametrize("windows_per_beat", [15, 20, 25, 30])
def test_aligned_click_train_tempo(windows_per_beat):
    """Window-aligned clicks from ~87 to ~174 BPM."""
    true_bpm = 60.0 / (windows_per_beat * 0.023)
    result = analyze(_aligned_click_train(windows_per_beat), 8000)
    assert abs(result - true_bpm) <= 2


def test_gain_invariance():
    """Detection depends on energy ratios, not absolute level."""
    samples = _click_train(120)
    expected = analyze(samples, 44100)
    assert expected != UNDETERMINED_BPM
    for gain in (0.01, 0.25, 3.7, 100.0):
        assert analyze(samples * gain, 44100) == expected


def test_double_time_folds_down():
    """220 BPM clicks exceed the range and fold to ~110, not 220."""
    result = analyze(_click_train(220), 44100)
    assert abs(result - 110) <= 2


def test_result_always_in_range_or_sentinel():
    for bpm in (45, 75, 100, 150, 250, 400):
        result = analyze(_click_train(bpm), 44100)
        assert result == UNDETERMINED_BPM or 60 <= result <= 180


# --- Failure exits ---

@pytest.mark.parametrize("seconds", [0.0, 0.5, 3.0, 30.0])
def test_silence_is_undetermined(seconds):
    assert analyze(np.zeros(int(seconds * 44100)), 44100) == UNDETERMINED_BPM


def test_shorter_than_lookback_is_undetermined():
    """Under ~1 second there is no window with a full lookback."""
    samples = _click_train(150, seconds=0.9)
    assert analyze(samples, 44100) == UNDETERMINED_BPM
    assert analyze_detailed(samples, 44100).onsets == []


def test_single_click_is_undetermined():
    samples = np.zeros(5 * 44100)
    samples[2 * 44100] = 1.0
    result = analyze_detailed(samples, 44100)
    assert len(result.onsets) == 1
    assert result.bpm == UNDETERMINED_BPM
    assert result.votes == {}


def test_three_clicks_is_undetermined():
    samples = np.zeros(6 * 44100)
    for t in (2.0, 2.5, 3.0):
        samples[int(t * 44100)] = 1.0
    result = analyze_detailed(samples, 44100)
    assert len(result.onsets) == 3
    assert result.bpm == UNDETERMINED_BPM


def test_empty_buffer():
    assert analyze([], 44100) == UNDETERMINED_BPM


@pytest.mark.parametrize("sample_rate", [0, -44100])
def test_invalid_sample_rate(sample_rate):
    """Precondition violations fall through to the sentinel, never raise."""
    assert analyze(_click_train(120), sample_rate) == UNDETERMINED_BPM


# --- Contract ---

def test_deterministic():
    samples = _click_train(100)
    assert analyze_detailed(samples, 44100) == analyze_detailed(samples.copy(), 44100)


def test_input_not_mutated():
    samples = _click_train(120).astype(np.float32)
    before = samples.copy()
    analyze(samples, 44100)
    np.testing.assert_array_equal(samples, before)


def test_accepts_plain_list():
    samples = _click_train(100)
    assert analyze(list(samples), 44100) == analyze(samples, 44100)


def test_detailed_stages_are_consistent():
    result = analyze_detailed(_click_train(120), 44100)
    assert result.detected
    assert result.window_length == 1014
    assert result.energy_windows == 441000 // 1014
    assert all(b > a for a, b in zip(result.onsets, result.onsets[1:]))
    assert all(60 <= bpm <= 180 for bpm in result.votes)
    assert sum(result.groups.values()) == sum(result.votes.values())
    assert result.bpm in result.groups
