"""CLI entry point: python -m trackbpm <audio_file>"""

import logging
import sys


def main():
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if not args:
        print("Usage: python -m trackbpm <audio_file> [--detail] [--full] [--verbose]")
        sys.exit(1)

    audio_file = args[0]
    show_detail = "--detail" in sys.argv
    full_length = "--full" in sys.argv

    if "--verbose" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from trackbpm.perception.decode import MAX_SECONDS, DecodeError
    from trackbpm.tagging import tag_track

    try:
        tags = tag_track(audio_file, max_seconds=None if full_length else MAX_SECONDS)
    except DecodeError as err:
        print(f"Error: {err}")
        sys.exit(1)

    print("\n--- Tempo ---")
    if tags.bpm:
        print(f"BPM: {tags.bpm}")
    else:
        print(f"BPM: not detected ({tags.message})")

    print("\n--- Loudness ---")
    sign = "+" if tags.gain_db >= 0 else ""
    print(f"Playback gain: {sign}{tags.gain_db:.1f} dB")

    if show_detail and tags.analysis is not None:
        a = tags.analysis
        print("\n--- Detail ---")
        print(f"Sample rate: {a.sample_rate} Hz, window: {a.window_length} samples "
              f"({a.energy_windows} windows)")
        print(f"Onsets: {len(a.onsets)}")
        if a.votes:
            print("Votes:  " + ", ".join(f"{bpm}:{n}" for bpm, n in a.votes.items()))
        if a.groups:
            print("Groups: " + ", ".join(f"{bpm}:{n}" for bpm, n in a.groups.items()))


if __name__ == "__main__":
    main()
