from __future__ import annotations


class GbkitError(Exception):
    """Base error for the gbkit library."""


class VolumeNotAdjustableError(GbkitError):
    """Raised when re-processing is requested on a sample with no original buffer."""
