"""Preview — listen to or export the processed buffer of a kit sample.

play() and save() work on any Sample, so decoded nibble data and freshly
imported audio can both be auditioned exactly as they will be stored.
"""

from __future__ import annotations

import logging
import os
import threading

import numpy as np
import soundfile as sf

from gbkit.config import KIT_SAMPLE_RATE
from gbkit.sample import Sample

_LOGGER = logging.getLogger(__name__)


def render(sample: Sample) -> np.ndarray:
    """Read the whole sample through its cursor into a fresh int16 array.

    The cursor is rewound first and left at the end.
    """
    sample.seek_start()
    count = sample.length_in_samples()
    out = np.empty(count, dtype=np.int16)
    for i in range(count):
        out[i] = sample.read()
    return out


def play(sample: Sample, sample_rate: int = KIT_SAMPLE_RATE) -> None:
    """Play a sample through the system audio output.

    Blocks until playback finishes. Ctrl+C stops cleanly.

    Args:
        sample:      Sample to play.
        sample_rate: Playback rate in Hz (default: the kit player rate).
    """
    import sounddevice as sd

    pcm = render(sample)
    _LOGGER.debug("Playing '%s' (%d samples)", sample.name, pcm.size)

    def _play():
        sd.play(pcm, samplerate=sample_rate)
        sd.wait()

    thread = threading.Thread(target=_play, daemon=True)
    thread.start()
    try:
        while thread.is_alive():
            thread.join(timeout=0.1)
    except KeyboardInterrupt:
        sd.stop()
        print("\nPlayback stopped.")


def save(sample: Sample, path: str, sample_rate: int = KIT_SAMPLE_RATE) -> None:
    """Write a sample to a 16-bit PCM audio file.

    The container is inferred from the file extension. Parent directories
    are created automatically.
    """
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    try:
        sf.write(path, render(sample), sample_rate, subtype="PCM_16")
    except Exception as exc:
        raise ValueError(f"Could not write audio file '{path}': {exc}") from exc
    _LOGGER.debug("Saved '%s' to %s", sample.name, path)
