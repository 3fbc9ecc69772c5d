"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass

# Rate the kit sample player runs at; imported audio is resampled to this.
KIT_SAMPLE_RATE = 11468

# Seed for the dither noise source. Fixed so re-processing is repeatable.
DITHER_SEED = 1

DEFAULT_VOLUME_DB = 0
# Picked by ear: a slow DC ramp dithered and truncated to 4 bits shows
# no audible steps between hardware volumes at this level.
DEFAULT_DITHER_DB = -30


@dataclass(frozen=True)
class ProcessConfig:
    """Settings for one run of the sample pipeline.

    Attributes:
        volume_db: Target peak level in dB relative to full scale.
                   0 normalises the loudest sample to full scale.
        dither_db: Dither noise level in dB relative to full scale.
        dither:    Whether the dither stage runs at all.
    """

    volume_db: int = DEFAULT_VOLUME_DB
    dither_db: int = DEFAULT_DITHER_DB
    dither: bool = True

    def __post_init__(self) -> None:
        errors = []
        if isinstance(self.volume_db, bool) or not isinstance(self.volume_db, int):
            errors.append(f"volume_db must be an integer, got {self.volume_db!r}")
        if isinstance(self.dither_db, bool) or not isinstance(self.dither_db, int):
            errors.append(f"dither_db must be an integer, got {self.dither_db!r}")
        if not isinstance(self.dither, bool):
            errors.append(f"dither must be a bool, got {self.dither!r}")
        if errors:
            raise ValueError("\n".join(errors))
