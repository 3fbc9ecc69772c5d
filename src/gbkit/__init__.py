from gbkit.config import ProcessConfig, KIT_SAMPLE_RATE
from gbkit.noise import PinkNoise
from gbkit.codec import decode_nibbles, nibble_byte_count, nibble_to_pcm
from gbkit.pipeline import process, normalize, dither, blend_wave_frames
from gbkit.sample import (
    Sample,
    NibbleSample,
    PcmSample,
    create_from_nibbles,
    create_from_original_samples,
    create_from_wav,
)
from gbkit.errors import GbkitError, VolumeNotAdjustableError

__all__ = [
    "ProcessConfig",
    "KIT_SAMPLE_RATE",
    "PinkNoise",
    "decode_nibbles",
    "nibble_byte_count",
    "nibble_to_pcm",
    "process",
    "normalize",
    "dither",
    "blend_wave_frames",
    "Sample",
    "NibbleSample",
    "PcmSample",
    "create_from_nibbles",
    "create_from_original_samples",
    "create_from_wav",
    "GbkitError",
    "VolumeNotAdjustableError",
]
