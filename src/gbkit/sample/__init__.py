"""Sample submodule — kit samples and the ways to create them.

Two concrete types:

    NibbleSample
        Decoded straight from packed 4-bit device data. Final as stored;
        can_adjust_volume() is False.

    PcmSample
        Built from 16-bit PCM (directly or via a decoded audio file).
        Keeps the original and can be re-processed with new settings.

Both inherit from Sample (name, processed buffer, read cursor, lengths).
"""

from gbkit.sample._base import Sample
from gbkit.sample.nibble import NibbleSample, create_from_nibbles
from gbkit.sample.pcm import PcmSample, create_from_original_samples, create_from_wav

__all__ = [
    "Sample",
    "NibbleSample",
    "PcmSample",
    "create_from_nibbles",
    "create_from_original_samples",
    "create_from_wav",
]
