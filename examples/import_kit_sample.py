# examples/import_kit_sample.py
#
# Import a WAV as a kit sample, try a couple of volumes, then save what
# the cartridge will actually play.

import sys

from gbkit import create_from_wav
from gbkit.preview import save

path = sys.argv[1] if len(sys.argv) > 1 else "kick.wav"

sample = create_from_wav(path, dither=True)
print(f"{sample.name}: {sample.length_in_samples()} samples, {sample.length_in_bytes()} bytes")

for volume in (0, -3, -6):
    sample.volume_db = volume
    sample.process_samples(dither=True)
    save(sample, f"out/{sample.name}.{-volume}db.wav")
    print(f"  wrote out/{sample.name}.{-volume}db.wav")
