"""WAV import — decode an audio file to mono 16-bit PCM at the kit sample rate."""

from __future__ import annotations

import logging
import os

import numpy as np
import soundfile as sf
from scipy import signal

from gbkit.codec import PCM_MAX, PCM_MIN
from gbkit.config import KIT_SAMPLE_RATE

_LOGGER = logging.getLogger(__name__)


def read_samples(filepath: str, sample_rate: int = KIT_SAMPLE_RATE) -> np.ndarray:
    """Load an audio file as mono int16 PCM resampled to ``sample_rate``.

    Args:
        filepath:    Path to a .wav, .flac, .ogg or other soundfile-readable file.
        sample_rate: Target rate in Hz (default: the kit player rate).

    Returns:
        1-D int16 array. Multi-channel files are mixed down by averaging.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError:        If the file cannot be read or sample_rate is not
                           a positive integer.
    """
    if not isinstance(sample_rate, int) or sample_rate <= 0:
        raise ValueError(f"sample_rate must be a positive integer, got {sample_rate!r}")

    # ── Load ──────────────────────────────────────────────────────────────────
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"Audio file not found: {filepath}")
    try:
        raw_audio, file_sr = sf.read(filepath, dtype="float64", always_2d=True)
    except Exception as exc:
        raise ValueError(f"Could not read audio file '{filepath}': {exc}") from exc

    # ── Mix down to mono ──────────────────────────────────────────────────────
    mono = raw_audio.mean(axis=1)

    # ── Resample to kit rate ──────────────────────────────────────────────────
    if file_sr != sample_rate and mono.size > 0:
        target_len = int(mono.size * sample_rate / file_sr)
        if target_len == 0:
            mono = np.zeros(0, dtype=np.float64)
        else:
            mono = np.asarray(signal.resample(mono, target_len))

    # ── Quantise to 16 bit ────────────────────────────────────────────────────
    pcm = np.clip(np.round(mono * 32768.0), PCM_MIN, PCM_MAX).astype(np.int16)

    _LOGGER.debug(
        "Read '%s': %d Hz, %d channel(s) → %d samples at %d Hz",
        filepath,
        file_sr,
        raw_audio.shape[1],
        pcm.size,
        sample_rate,
    )
    return pcm
