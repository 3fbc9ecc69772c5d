"""PinkNoise — seeded 1/f noise source used by the dither stage.

White Gaussian noise is shaped by a short multipole IIR filter whose
coefficients follow the fractional-difference expansion of ``(1 - z^-1)^(α/2)``.
``alpha=1`` gives pink noise; ``alpha=0`` gives white.

The sequence is fully determined by ``seed``: two generators created with
the same seed (or one reseeded) produce identical output.

Example::

    noise = PinkNoise(seed=1)
    first = noise.take(4)
    noise.reseed(1)
    assert (noise.take(4) == first).all()
"""

from __future__ import annotations

import numpy as np


class PinkNoise:
    """Infinite, restartable stream of roughly unit-amplitude 1/f^α noise."""

    def __init__(self, seed: int = 1, alpha: float = 1.0, poles: int = 5) -> None:
        """Create a noise source.

        Args:
            seed:  Seed for the underlying Gaussian generator.
            alpha: Spectral slope exponent, 0.0–2.0 (1.0 = pink).
            poles: Filter order. More poles extend the 1/f slope to lower
                   frequencies at a small cost per sample.

        Raises:
            ValueError: If alpha is outside 0.0–2.0 or poles < 1.
        """
        if not 0.0 <= alpha <= 2.0:
            raise ValueError(f"alpha must be 0.0–2.0, got {alpha}")
        if poles < 1:
            raise ValueError(f"poles must be >= 1, got {poles}")

        self.alpha = alpha
        self.poles = poles

        multipliers = np.empty(poles, dtype=np.float64)
        a = 1.0
        for i in range(poles):
            a = (i - alpha / 2) * a / (i + 1)
            multipliers[i] = a
        self._multipliers = multipliers

        self.reseed(seed)

    def reseed(self, seed: int) -> None:
        """Restart the sequence from the beginning for ``seed``."""
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._values = np.zeros(self.poles, dtype=np.float64)
        # Run the filter in so the first output is already stationary.
        for _ in range(5 * self.poles):
            self.next()

    def next(self) -> float:
        """Return the next noise value."""
        x = float(self._rng.standard_normal())
        x -= float(np.dot(self._multipliers, self._values))
        self._values[1:] = self._values[:-1]
        self._values[0] = x
        return x

    def take(self, count: int) -> np.ndarray:
        """Return the next ``count`` values as a float64 array."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        out = np.empty(count, dtype=np.float64)
        for i in range(count):
            out[i] = self.next()
        return out

    def __iter__(self) -> PinkNoise:
        return self

    def __next__(self) -> float:
        return self.next()

    def __repr__(self) -> str:
        return f"PinkNoise(seed={self.seed}, alpha={self.alpha}, poles={self.poles})"
