"""
Experiment: How accurate is the onset-vote estimator across the tempo range?

Renders synthetic click tracks from 50 to 240 BPM, optionally buried in
white noise, and compares the detected tempo with the true one. Useful
when retuning the window, lookback, or bucket constants.

Usage:
    python scripts/sweep_click_tracks.py [--noise 0.05] [--rate 44100]
"""

import argparse

import numpy as np

from trackbpm import analyze


def render_clicks(bpm, seconds, sample_rate, noise, rng):
    """Click track with short decaying bursts instead of single-sample impulses."""
    n = int(seconds * sample_rate)
    samples = rng.normal(0.0, noise, n) if noise > 0 else np.zeros(n)
    burst = np.exp(-np.arange(int(0.005 * sample_rate)) / (0.001 * sample_rate))
    spacing = 60.0 / bpm * sample_rate
    for start in np.round(np.arange(0, n / spacing) * spacing).astype(int):
        end = min(n, start + len(burst))
        samples[start:end] += 0.8 * burst[: end - start]
    return samples


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--noise", type=float, default=0.0, help="white noise std dev")
    parser.add_argument("--rate", type=int, default=44100, help="sample rate in Hz")
    parser.add_argument("--seconds", type=float, default=30.0)
    args = parser.parse_args()

    rng = np.random.default_rng(0)

    print(f"\n  {'True':>5}  {'Got':>5}  {'Err':>5}  Folded")
    print(f"  {'─'*5}  {'─'*5}  {'─'*5}  {'─'*6}")

    hits = 0
    total = 0
    for bpm in range(50, 241, 5):
        samples = render_clicks(bpm, args.seconds, args.rate, args.noise, rng)
        got = analyze(samples, args.rate)

        # Compare against the in-range octave of the true tempo
        target = float(bpm)
        while target < 60:
            target *= 2
        while target > 180:
            target /= 2

        err = got - target if got else float("nan")
        ok = got != 0 and abs(err) <= 2
        hits += ok
        total += 1
        folded = "" if target == bpm else f"→ {target:g}"
        mark = "" if ok else "  ✗"
        print(f"  {bpm:5d}  {got:5d}  {err:+5.1f}  {folded}{mark}")

    print(f"\n  {hits}/{total} within ±2 BPM")


if __name__ == "__main__":
    main()
