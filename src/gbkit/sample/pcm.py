"""PcmSample — a sample imported from decoded audio, re-processable at will."""

from __future__ import annotations

import dataclasses
import logging
import os

import numpy as np

from gbkit.config import DEFAULT_DITHER_DB, DEFAULT_VOLUME_DB, ProcessConfig
from gbkit.pipeline import as_pcm16, process
from gbkit.sample._base import Sample
from gbkit.wav import read_samples

_LOGGER = logging.getLogger(__name__)


class PcmSample(Sample):
    """A sample built from 16-bit PCM that keeps its original recording.

    The processed buffer is always derived from ``original_samples`` by the
    pipeline (normalise → dither → blend). Changing ``volume_db`` or
    ``dither_db`` has no effect until process_samples() is called again,
    which rebuilds the whole buffer from scratch.

    Example::

        s = PcmSample(pcm, "kick", ProcessConfig(volume_db=-3))
        s.volume_db = -6
        s.process_samples(dither=True)
    """

    def __init__(
        self,
        original,
        name: str,
        config: ProcessConfig | None = None,
    ) -> None:
        """Store the original PCM and run the pipeline once.

        Args:
            original: Mono signed 16-bit PCM samples at the kit sample rate.
            name:     Label shown in the kit editor.
            config:   Pipeline settings. Defaults to ``ProcessConfig()``.

        Raises:
            ValueError: If ``original`` is not valid 16-bit mono PCM.
        """
        if config is None:
            config = ProcessConfig()
        self._original = as_pcm16(original)
        self._config = config
        super().__init__(name, process(self._original, config))

    # ── Original buffer ───────────────────────────────────────────────────────

    @property
    def original_samples(self) -> np.ndarray:
        view = self._original.view()
        view.flags.writeable = False
        return view

    def work_sample_data(self) -> np.ndarray:
        return self._original.copy()

    def can_adjust_volume(self) -> bool:
        return True

    # ── Pipeline settings ─────────────────────────────────────────────────────

    @property
    def config(self) -> ProcessConfig:
        return self._config

    @property
    def volume_db(self) -> int:
        return self._config.volume_db

    @volume_db.setter
    def volume_db(self, value: int) -> None:
        self._config = dataclasses.replace(self._config, volume_db=value)

    @property
    def dither_db(self) -> int:
        return self._config.dither_db

    @dither_db.setter
    def dither_db(self, value: int) -> None:
        self._config = dataclasses.replace(self._config, dither_db=value)

    def process_samples(self, dither: bool = True) -> None:
        """Rebuild the processed buffer from the original with current settings.

        Args:
            dither: Whether the dither stage runs on this pass.
        """
        self._config = dataclasses.replace(self._config, dither=dither)
        self._processed = process(self._original, self._config)

    def __repr__(self) -> str:
        return (
            f"PcmSample('{self.name}', {self.length_in_samples()} samples, "
            f"volume_db={self.volume_db}, dither_db={self.dither_db})"
        )


def create_from_original_samples(
    pcm,
    name: str,
    volume_db: int = DEFAULT_VOLUME_DB,
    dither_db: int = DEFAULT_DITHER_DB,
) -> PcmSample:
    """Build a sample from already-decoded PCM. The pipeline runs with dithering."""
    return PcmSample(pcm, name, ProcessConfig(volume_db, dither_db, dither=True))


def create_from_wav(
    filepath: str,
    dither: bool = True,
    volume_db: int = DEFAULT_VOLUME_DB,
    dither_db: int = DEFAULT_DITHER_DB,
) -> PcmSample:
    """Import an audio file as a kit sample named after the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError:        If the file cannot be decoded.
    """
    pcm = read_samples(filepath)
    name = os.path.basename(filepath)
    _LOGGER.debug("Imported '%s' (%d samples)", name, pcm.size)
    return PcmSample(pcm, name, ProcessConfig(volume_db, dither_db, dither=dither))
