"""Sample base class — shared buffer ownership, read cursor and length accounting."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from gbkit.codec import nibble_byte_count
from gbkit.errors import VolumeNotAdjustableError


class Sample(ABC):
    """Abstract base for a kit sample.

    Handles everything shared between NibbleSample and PcmSample:
    - Holding the immutable name and the processed int16 buffer
    - Sequential reading through a cursor (seek_start() / read())
    - Sample and device-byte length queries

    Subclasses decide where the processed buffer comes from and whether it
    can be rebuilt (see can_adjust_volume()).
    """

    def __init__(self, name: str, processed: np.ndarray) -> None:
        self._name = name
        self._processed = processed
        self._read_pos = 0

    # ── Identity ──────────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def processed_samples(self) -> np.ndarray:
        """Read-only view of the buffer that is played back or re-encoded."""
        view = self._processed.view()
        view.flags.writeable = False
        return view

    # ── Length ────────────────────────────────────────────────────────────────

    def length_in_samples(self) -> int:
        return int(self._processed.size)

    def length_in_bytes(self) -> int:
        """Packed nibble bytes this sample occupies, in whole 16-byte frames."""
        return nibble_byte_count(self.length_in_samples())

    # ── Cursor ────────────────────────────────────────────────────────────────

    def seek_start(self) -> None:
        self._read_pos = 0

    def read(self) -> int:
        """Return the sample under the cursor and advance by one.

        Raises:
            IndexError: If the cursor is already past the end. Callers are
                        expected to check length_in_samples() first.
        """
        if self._read_pos >= self._processed.size:
            raise IndexError(
                f"read past end of sample '{self._name}' "
                f"(position {self._read_pos}, length {self._processed.size})"
            )
        value = int(self._processed[self._read_pos])
        self._read_pos += 1
        return value

    # ── Editing support ───────────────────────────────────────────────────────

    def work_sample_data(self) -> np.ndarray:
        """Copy of the richest buffer held: the original if kept, else the processed one."""
        return self._processed.copy()

    @property
    def volume_db(self) -> int | None:
        """Pipeline volume, or None for samples that keep no original buffer."""
        return None

    @volume_db.setter
    def volume_db(self, value: int) -> None:
        raise VolumeNotAdjustableError(
            f"Sample '{self._name}' has no original audio; its volume is fixed"
        )

    @property
    def dither_db(self) -> int | None:
        return None

    @dither_db.setter
    def dither_db(self, value: int) -> None:
        raise VolumeNotAdjustableError(
            f"Sample '{self._name}' has no original audio; it cannot be re-dithered"
        )

    def process_samples(self, dither: bool = True) -> None:
        """Rebuild the processed buffer from the original recording.

        Raises:
            VolumeNotAdjustableError: For samples that keep no original buffer.
                                      Check can_adjust_volume() first.
        """
        raise VolumeNotAdjustableError(
            f"Sample '{self._name}' has no original audio to re-process"
        )

    # ── Subclass contract ─────────────────────────────────────────────────────

    @abstractmethod
    def can_adjust_volume(self) -> bool:
        """Whether the sample keeps enough state to be re-processed."""

    def __len__(self) -> int:
        return self.length_in_samples()
