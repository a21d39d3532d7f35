import argparse
import logging
import os
import sys
from typing import List, Optional

from .buffer import ByteBuffer
from .codecs import get_codec
from .config import ALGORITHMS, DEFAULT_ALGORITHM, TASKS, CodecConfiguration
from .base16 import CASES
from .errors import BinaryTextError, ConfigurationError
from .utils import read_encoded_file, read_file, write_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binarytext",
        description="Encode and decode text or files with Base16, Base32, Base32Hex, Base64, Base64Url and Ascii85.",
    )
    tasks = parser.add_mutually_exclusive_group(required=True)
    for task in TASKS:
        tasks.add_argument(
            f"--{task}",
            dest="task",
            action="store_const",
            const=task,
            help=f"Task: {task.replace('-', ' ')}.",
        )
    parser.add_argument(
        "--algorithm",
        choices=ALGORITHMS,
        default=DEFAULT_ALGORITHM,
        help=f"Codec to use (default: {DEFAULT_ALGORITHM}).",
    )
    parser.add_argument("--case", choices=CASES, help="Base16 only: digit case.")
    parser.add_argument(
        "--without-padding",
        dest="padding",
        action="store_const",
        const=False,
        help="Base32/Base32Hex/Base64/Base64Url encode only: omit trailing '='.",
    )
    parser.add_argument(
        "--fold-spaces",
        action="store_const",
        const=True,
        help="Ascii85 only: write four spaces as 'y'.",
    )
    parser.add_argument(
        "--adobe-mode",
        action="store_const",
        const=True,
        help="Ascii85 only: wrap the text in '<~' and '~>'.",
    )
    inputs = parser.add_mutually_exclusive_group(required=True)
    inputs.add_argument("--input-string", help="Read input from this string.")
    inputs.add_argument("--input-file", help="Read input from this file.")
    parser.add_argument("--output-file", help="Write output to this file instead of stdout.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _check_paths(args: argparse.Namespace) -> None:
    for flag in ("input_string", "input_file", "output_file"):
        value = getattr(args, flag)
        if value is not None and value == "":
            raise ConfigurationError(f'Empty value for "--{flag.replace("_", "-")}"')
    if args.task == "encode-binary" and args.input_file is None:
        raise ConfigurationError('"--encode-binary" requires "--input-file"')
    if args.task == "decode-binary" and args.output_file is None:
        raise ConfigurationError('"--decode-binary" requires "--output-file"')


def _load_payload(args: argparse.Namespace) -> bytes:
    """Bytes to encode: the file contents, or the argument as the OS passed it."""
    if args.input_file is not None:
        return read_file(args.input_file)
    return os.fsencode(args.input_string)


def _load_encoded(args: argparse.Namespace) -> str:
    if args.input_file is not None:
        return read_encoded_file(args.input_file)
    return args.input_string


def _write_output(args: argparse.Namespace, output: bytes) -> None:
    if args.output_file is not None:
        write_file(output, args.output_file)
        return
    sys.stdout.flush()
    sys.stdout.buffer.write(output + b"\n")
    sys.stdout.buffer.flush()


def run(args: argparse.Namespace) -> None:
    """Carry out the task described by parsed command line arguments."""
    _check_paths(args)
    config = CodecConfiguration(
        algorithm=args.algorithm,
        case=args.case,
        padding=args.padding,
        fold_spaces=args.fold_spaces,
        adobe_mode=args.adobe_mode,
    ).resolve(args.task)
    options = config.codec_options(args.task)
    codec = get_codec(config.algorithm)
    logger.debug("%s with %s %s", args.task, codec.name, options)

    # encoded text is always ASCII; decoded bytes are written as they are
    if args.task == "encode-text":
        _write_output(args, codec.encode(_load_payload(args), **options).encode("ascii"))
    elif args.task == "encode-binary":
        _write_output(args, codec.encode_buffer(ByteBuffer(args.input_file), **options).encode("ascii"))
    elif args.task == "decode-text":
        _write_output(args, codec.decode(_load_encoded(args), **options))
    elif args.task == "decode-binary":
        codec.decode_buffer(_load_encoded(args), **options).write_to_file(args.output_file)
    else:
        raise ConfigurationError(f"Invalid task: {args.task!r}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except BinaryTextError as exc:
        print(f"binarytext: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
