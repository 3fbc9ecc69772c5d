from __future__ import annotations

import argparse
import logging
from pathlib import Path

from gbkit.config import DEFAULT_DITHER_DB, DEFAULT_VOLUME_DB
from gbkit.errors import GbkitError
from gbkit.logging_utils import configure_logging
from gbkit.preview import play, save
from gbkit.sample import create_from_nibbles, create_from_wav

_LOGGER = logging.getLogger("gbkit.cli")


def _add_pipeline_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--volume-db", type=int, default=DEFAULT_VOLUME_DB)
    parser.add_argument("--dither-db", type=int, default=DEFAULT_DITHER_DB)
    parser.add_argument("--no-dither", action="store_true", help="Skip the dither stage.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gbkit")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    preview = sub.add_parser("preview", help="Play an audio file as it will sound in a kit.")
    preview.add_argument("input", type=str)
    _add_pipeline_args(preview)

    convert = sub.add_parser("convert", help="Write the processed kit sample to a WAV file.")
    convert.add_argument("input", type=str)
    convert.add_argument("output", type=str)
    _add_pipeline_args(convert)

    decode = sub.add_parser("decode", help="Decode a raw nibble dump to a WAV file.")
    decode.add_argument("input", type=str)
    decode.add_argument("output", type=str)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "decode":
            data = Path(args.input).read_bytes()
            sample = create_from_nibbles(data, Path(args.input).name)
            save(sample, args.output)
            _LOGGER.info("Decoded %d samples to %s", sample.length_in_samples(), args.output)
            return 0

        sample = create_from_wav(
            args.input,
            dither=not args.no_dither,
            volume_db=args.volume_db,
            dither_db=args.dither_db,
        )
        _LOGGER.info(
            "%s: %d samples, %d bytes in kit",
            sample.name,
            sample.length_in_samples(),
            sample.length_in_bytes(),
        )
        if args.command == "preview":
            play(sample)
        else:
            save(sample, args.output)
        return 0
    except (OSError, ValueError, GbkitError) as exc:
        _LOGGER.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
