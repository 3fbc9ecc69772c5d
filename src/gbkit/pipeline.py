"""Sample pipeline — normalise, dither, then blend wave frames.

Every stage takes an int16 buffer and returns a new int16 buffer; inputs
are never modified. ``process()`` chains them in the only valid order:

    original ──normalize──▶ ──dither (optional)──▶ ──blend_wave_frames──▶ processed

Dithering has to see normalised levels, and blending has to act on the
values that will actually be quantised to nibbles.
"""

from __future__ import annotations

import logging

import numpy as np

from gbkit.codec import FRAME_SAMPLES, PCM_MAX, PCM_MIN
from gbkit.config import DITHER_SEED, ProcessConfig
from gbkit.noise import PinkNoise

_LOGGER = logging.getLogger(__name__)

# Tested on DMG-01 with a 440 Hz sine wave.
_BLEND_OFFSET = 2


def as_pcm16(samples) -> np.ndarray:
    """Validate a PCM sequence and return it as a fresh int16 array.

    Raises:
        ValueError: If the input is not one-dimensional or holds values
                    outside the signed 16-bit range.
    """
    arr = np.asarray(samples)
    if arr.ndim != 1:
        raise ValueError(f"Expected mono PCM (1-D), got shape {arr.shape}")
    if arr.size == 0:
        return np.zeros(0, dtype=np.int16)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Expected integer PCM samples, got dtype {arr.dtype}")
    lo, hi = int(arr.min()), int(arr.max())
    if lo < PCM_MIN or hi > PCM_MAX:
        raise ValueError(
            f"PCM samples must lie in [{PCM_MIN}, {PCM_MAX}], got range [{lo}, {hi}]"
        )
    return arr.astype(np.int16, copy=True)


def _db_to_gain(db: float) -> float:
    return 10 ** (db / 20.0)


def peak_ratio(samples: np.ndarray) -> float:
    """Loudest sample as a ratio (0.0–1.0) of the signed extreme on its side."""
    if samples.size == 0:
        return 0.0
    s = samples.astype(np.float64)
    ratios = np.where(s < 0, s / PCM_MIN, s / PCM_MAX)
    return max(0.0, float(ratios.max()))


def normalize(samples: np.ndarray, volume_db: int = 0) -> np.ndarray:
    """Scale so the loudest sample sits at ``volume_db`` relative to full scale.

    Silent input is returned unchanged. Results that would exceed the int16
    range (only possible with ``volume_db > 0``) saturate.
    """
    out = np.array(samples, dtype=np.int16, copy=True)
    peak = peak_ratio(out)
    if peak == 0:
        return out
    gain = _db_to_gain(volume_db)
    # np.round: exact halves go to the even neighbour.
    scaled = np.round(out.astype(np.float64) * gain / peak)
    return np.clip(scaled, PCM_MIN, PCM_MAX).astype(np.int16)


def dither(
    samples: np.ndarray, dither_db: int, noise: PinkNoise | None = None
) -> np.ndarray:
    """Add pink noise at ``dither_db`` below full scale, saturating at int16.

    Args:
        samples:   int16 input buffer.
        dither_db: Noise level in dB relative to full scale.
        noise:     Noise source to draw from. A fresh ``PinkNoise`` seeded
                   with ``DITHER_SEED`` is used when omitted, which makes
                   repeated runs identical.

    Returns:
        New int16 buffer. Sums are truncated toward zero after clamping.
    """
    if noise is None:
        noise = PinkNoise(seed=DITHER_SEED)
    noise_level = PCM_MAX * _db_to_gain(dither_db)
    noisy = samples.astype(np.float64) + noise.take(samples.size) * noise_level
    return np.clip(noisy, PCM_MIN, PCM_MAX).astype(np.int16)


def blend_wave_frames(samples: np.ndarray) -> np.ndarray:
    """Soften the seam the hardware leaves at each 32-sample frame start.

    The first sample of a frame is played back with the value of the last
    completed sample of the previous frame. For each frame start ``i`` the
    samples at ``i`` and ``i - 2`` are replaced by their average (truncated
    toward zero).
    """
    out = np.array(samples, dtype=np.int16, copy=True)
    starts = np.arange(FRAME_SAMPLES, out.size, FRAME_SAMPLES)
    if starts.size == 0:
        return out
    pair_sum = out[starts].astype(np.int32) + out[starts - _BLEND_OFFSET]
    avg = np.fix(pair_sum / 2).astype(np.int16)
    out[starts] = avg
    out[starts - _BLEND_OFFSET] = avg
    return out


def process(original, config: ProcessConfig | None = None) -> np.ndarray:
    """Run the full pipeline on ``original`` and return the processed buffer.

    Args:
        original: Mono signed 16-bit PCM samples. Not modified.
        config:   Pipeline settings. Defaults to ``ProcessConfig()``.

    Returns:
        New int16 array the same length as ``original``.

    Raises:
        ValueError: If ``original`` is not valid 16-bit mono PCM.
    """
    if config is None:
        config = ProcessConfig()
    samples = as_pcm16(original)

    samples = normalize(samples, config.volume_db)
    if config.dither:
        samples = dither(samples, config.dither_db)
    samples = blend_wave_frames(samples)

    _LOGGER.debug(
        "Processed %d samples (volume_db=%d, dither=%s, dither_db=%d)",
        samples.size,
        config.volume_db,
        config.dither,
        config.dither_db,
    )
    return samples
