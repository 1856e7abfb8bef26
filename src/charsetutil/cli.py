"""Command-line interface for charsetutil."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, Any

import charsetutil
from charsetutil.errors import CharsetError

_DEFAULT_MAX_BYTES = 200_000


def _error(message: str) -> None:
    print(f"charsetutil: {message}", file=sys.stderr)


def _guess(args: argparse.Namespace) -> int:
    status = 0
    sources = args.files or ["-"]
    for filepath in sources:
        name = "stdin" if filepath == "-" else filepath
        try:
            if filepath == "-":
                data = sys.stdin.buffer.read(_DEFAULT_MAX_BYTES)
            else:
                with Path(filepath).open("rb") as f:
                    data = f.read(_DEFAULT_MAX_BYTES)
            result = charsetutil.guess_bytes(data)
        except (OSError, CharsetError) as e:
            _error(f"{name}: {e}")
            status = 1
            continue
        if args.minimal:
            print(result.charset)
        else:
            language = f" ({result.language})" if result.language else ""
            print(
                f"{name}: {result.charset}{language} "
                f"with confidence {result.confidence}"
            )
    return status


def _open_input(filepath: str | None) -> IO[Any]:
    if filepath is None or filepath == "-":
        return sys.stdin.buffer
    return Path(filepath).open("rb")


def _decode(args: argparse.Namespace) -> int:
    try:
        reader = _open_input(args.file)
        try:
            text = charsetutil.decode_reader(
                reader, args.encoding, errors=args.errors
            )
        finally:
            if reader is not sys.stdin.buffer:
                reader.close()
    except (OSError, LookupError, UnicodeError) as e:
        _error(str(e))
        return 1
    sys.stdout.buffer.write(text.encode("utf-8", "surrogateescape"))
    sys.stdout.buffer.flush()
    return 0


def _encode(args: argparse.Namespace) -> int:
    try:
        reader = _open_input(args.file)
        try:
            data = charsetutil.encode_reader(
                reader, args.encoding, errors=args.errors
            )
        finally:
            if reader is not sys.stdin.buffer:
                reader.close()
    except (OSError, LookupError, UnicodeError) as e:
        _error(str(e))
        return 1
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
    return 0


def main(argv: list[str] | None = None) -> None:
    """Run the ``charsetutil`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Decode, encode, or guess legacy character encodings."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"charsetutil {charsetutil.__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    guess_parser = subparsers.add_parser(
        "guess", help="Guess the encoding and language of files"
    )
    guess_parser.add_argument("files", nargs="*", help="Files to examine")
    guess_parser.add_argument(
        "--minimal", action="store_true", help="Output only the charset name"
    )
    guess_parser.set_defaults(handler=_guess)

    decode_parser = subparsers.add_parser(
        "decode", help="Decode a file from ENCODING and write UTF-8 to stdout"
    )
    decode_parser.add_argument("-e", "--encoding", required=True)
    decode_parser.add_argument(
        "--errors",
        default="replace",
        help="Codec error handler for malformed input",
    )
    decode_parser.add_argument("file", nargs="?", help="Input file (default stdin)")
    decode_parser.set_defaults(handler=_decode)

    encode_parser = subparsers.add_parser(
        "encode", help="Encode a UTF-8 file into ENCODING and write it to stdout"
    )
    encode_parser.add_argument("-e", "--encoding", required=True)
    encode_parser.add_argument(
        "--errors",
        default="strict",
        help="Codec error handler for unrepresentable characters",
    )
    encode_parser.add_argument("file", nargs="?", help="Input file (default stdin)")
    encode_parser.set_defaults(handler=_encode)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    status = args.handler(args)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
