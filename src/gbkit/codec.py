"""Nibble codec — device 4-bit waveform bytes to 16-bit PCM and back-accounting.

Each byte on the cartridge packs two unsigned 4-bit samples, high nibble
first. A nibble ``n`` decodes to ``(n - 8) * 4096``, so 0 lands exactly on
the int16 minimum and 15 on 28672.

Example::

    decode_nibbles(bytes([0x00, 0xFF]))
    # → array([-32768, -32768, 28672, 28672], dtype=int16)
"""

from __future__ import annotations

import numpy as np

PCM_MIN = -32768
PCM_MAX = 32767

# The hardware plays waves in 32-sample frames, i.e. 16 packed bytes.
FRAME_SAMPLES = 0x20
FRAME_BYTES = FRAME_SAMPLES // 2

_NIBBLE_STEP = 4096
_NIBBLE_BIAS = 8


def nibble_to_pcm(nibble: int) -> int:
    """Decode a single 4-bit value (0–15) to a signed 16-bit sample.

    Raises:
        ValueError: If ``nibble`` is outside 0–15.
    """
    if not 0 <= nibble <= 0xF:
        raise ValueError(f"nibble must be 0–15, got {nibble}")
    return (nibble - _NIBBLE_BIAS) * _NIBBLE_STEP


def decode_nibbles(data: bytes | bytearray | np.ndarray) -> np.ndarray:
    """Unpack nibble bytes into an int16 PCM array of twice the length.

    Args:
        data: Packed bytes, two samples per byte, high nibble first.

    Returns:
        int16 array of length ``2 * len(data)``. Empty input gives an
        empty array.
    """
    raw = np.frombuffer(bytes(data), dtype=np.uint8)
    nibbles = np.empty(raw.size * 2, dtype=np.int32)
    nibbles[0::2] = raw >> 4
    nibbles[1::2] = raw & 0x0F
    return ((nibbles - _NIBBLE_BIAS) * _NIBBLE_STEP).astype(np.int16)


def nibble_byte_count(num_samples: int) -> int:
    """Number of packed bytes a buffer occupies on the device.

    Half the sample count, rounded down to whole 16-byte frames. Partial
    frames are dropped, never padded.
    """
    if num_samples < 0:
        raise ValueError(f"num_samples must be >= 0, got {num_samples}")
    count = num_samples // 2
    count -= count % FRAME_BYTES
    return count
