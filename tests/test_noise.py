from __future__ import annotations

import itertools

import numpy as np
import pytest

from gbkit.noise import PinkNoise


def test_same_seed_gives_same_sequence() -> None:
    a = PinkNoise(seed=1).take(500)
    b = PinkNoise(seed=1).take(500)
    assert np.array_equal(a, b)


def test_reseed_restarts_sequence() -> None:
    noise = PinkNoise(seed=7)
    first = noise.take(100)
    noise.take(50)
    noise.reseed(7)
    assert np.array_equal(noise.take(100), first)


def test_different_seeds_differ() -> None:
    assert not np.array_equal(PinkNoise(seed=1).take(100), PinkNoise(seed=2).take(100))


def test_iteration_matches_next() -> None:
    values = list(itertools.islice(PinkNoise(seed=3), 10))
    noise = PinkNoise(seed=3)
    assert values == [noise.next() for _ in range(10)]


def test_noise_is_roughly_unit_amplitude_and_centred() -> None:
    x = PinkNoise(seed=1).take(20_000)
    assert abs(float(x.mean())) < 0.5
    assert 0.5 < float(x.std()) < 3.0


def test_spectrum_tilts_down_with_frequency() -> None:
    x = PinkNoise(seed=1).take(1 << 15)
    power = np.abs(np.fft.rfft(x)) ** 2
    n = power.size
    low = power[1 : n // 16].mean()
    high = power[n // 2 :].mean()
    assert low > 2 * high


def test_white_noise_is_flat() -> None:
    x = PinkNoise(seed=1, alpha=0.0).take(1 << 15)
    power = np.abs(np.fft.rfft(x)) ** 2
    n = power.size
    ratio = power[1 : n // 16].mean() / power[n // 2 :].mean()
    assert 0.7 < ratio < 1.4


def test_invalid_parameters_rejected() -> None:
    with pytest.raises(ValueError):
        PinkNoise(alpha=3.0)
    with pytest.raises(ValueError):
        PinkNoise(poles=0)
    with pytest.raises(ValueError):
        PinkNoise().take(-1)
