from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from gbkit.config import KIT_SAMPLE_RATE
from gbkit.preview import render, save
from gbkit.sample import create_from_nibbles, create_from_wav
from gbkit.wav import read_samples


def _write_tone(path: Path, sample_rate: int, channels: int = 1, seconds: float = 0.25) -> None:
    t = np.arange(int(sample_rate * seconds)) / sample_rate
    tone = 0.25 * np.sin(2 * np.pi * 440 * t)
    data = np.stack([tone] * channels, axis=1) if channels > 1 else tone
    sf.write(str(path), data, sample_rate, subtype="PCM_16")


def test_read_samples_at_kit_rate(tmp_path: Path) -> None:
    wav = tmp_path / "tone.wav"
    _write_tone(wav, KIT_SAMPLE_RATE)
    pcm = read_samples(str(wav))
    assert pcm.dtype == np.int16
    assert pcm.size == int(KIT_SAMPLE_RATE * 0.25)
    assert 7000 < int(np.abs(pcm).max()) < 9000


def test_read_samples_resamples_and_mixes_down(tmp_path: Path) -> None:
    wav = tmp_path / "stereo.wav"
    _write_tone(wav, 44100, channels=2)
    pcm = read_samples(str(wav))
    assert pcm.ndim == 1
    assert pcm.size == int(int(44100 * 0.25) * KIT_SAMPLE_RATE / 44100)


def test_read_samples_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_samples(str(tmp_path / "nope.wav"))


def test_read_samples_garbage_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.wav"
    bad.write_bytes(b"not audio at all")
    with pytest.raises(ValueError):
        read_samples(str(bad))


def test_create_from_wav_normalises(tmp_path: Path) -> None:
    wav = tmp_path / "kick.wav"
    _write_tone(wav, KIT_SAMPLE_RATE)
    s = create_from_wav(str(wav), dither=False)
    assert s.name == "kick.wav"
    assert s.can_adjust_volume()
    assert int(np.abs(s.processed_samples.astype(np.int32)).max()) > 30000


def test_render_reads_through_cursor() -> None:
    s = create_from_nibbles(bytes([0x8F, 0x07]), "c")
    s.read()
    assert render(s).tolist() == [0, 28672, -32768, -4096]


def test_save_writes_pcm16_wav(tmp_path: Path) -> None:
    s = create_from_nibbles(bytes([0x00, 0xFF] * 16), "c")
    out = tmp_path / "nested" / "c.wav"
    save(s, str(out))
    data, sr = sf.read(str(out), dtype="int16")
    assert sr == KIT_SAMPLE_RATE
    assert data.tolist() == s.processed_samples.tolist()


def test_read_samples_too_short_to_resample(tmp_path: Path) -> None:
    wav = tmp_path / "blip.wav"
    sf.write(str(wav), np.array([0.5, 0.25]), 44100, subtype="PCM_16")
    assert read_samples(str(wav)).size == 0

    s = create_from_wav(str(wav), dither=False)
    assert s.length_in_samples() == 0
    assert s.length_in_bytes() == 0


def test_save_unknown_extension_raises_value_error(tmp_path: Path) -> None:
    s = create_from_nibbles(bytes([0x00, 0xFF]), "c")
    with pytest.raises(ValueError):
        save(s, str(tmp_path / "c.xyz"))
