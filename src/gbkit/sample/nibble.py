"""NibbleSample — a sample decoded straight from device nibble data."""

from __future__ import annotations

from gbkit.codec import decode_nibbles
from gbkit.sample._base import Sample


class NibbleSample(Sample):
    """A sample read back from a kit's packed 4-bit waveform.

    The nibble data is already final, so no normalisation, dithering or
    blending is applied and the volume cannot be changed: there is no
    original recording to re-derive it from.

    Example::

        s = NibbleSample.from_nibbles(bytes([0x00, 0xFF]), "hat")
        s.length_in_samples()   # 4
        s.can_adjust_volume()   # False
    """

    @classmethod
    def from_nibbles(cls, data: bytes, name: str) -> NibbleSample:
        """Decode packed nibble bytes (high nibble first) into a sample."""
        return cls(name, decode_nibbles(data))

    def can_adjust_volume(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"NibbleSample('{self.name}', {self.length_in_samples()} samples)"


def create_from_nibbles(data: bytes, name: str) -> NibbleSample:
    return NibbleSample.from_nibbles(data, name)
