# file: src/module5_link_codec/cli.py

"""
Line-oriented codec sessions.

Each input line is one message. A session ends at the first sentinel line
("end" for the codecs, "-1" for the converter) or at end of input. A
message the codec rejects produces an error reply and the session goes on.

Examples:
  # CRC with a custom generator
  printf '1101011011\\nend\\n' | linkcodec crc --generator 10011

  # Base conversion
  printf '255\\n-1\\n' | linkcodec convert
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, TextIO

from module1_bitstring import convert_all
from module1_bitstring.errors import BitStringError, LinkCodecError
from .config import load_config, build_crc_codec, build_hamming_codec, build_stuffing_codec

logger = logging.getLogger(__name__)

DEFAULT_SENTINELS = ('end', '-1')

COMMANDS = ('crc', 'verify', 'hamming', 'stuff', 'destuff', 'convert')


def setup_logging(verbose: bool = False, config: Optional[Dict[str, Any]] = None):
    """Configure logging for a CLI session."""
    log_config = (config or {}).get('logging', {})
    if verbose:
        level = logging.INFO
    else:
        level = getattr(logging, str(log_config.get('level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format=log_config.get('format', '%(asctime)s [%(levelname)s] %(message)s'),
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def run_session(
    lines: Iterable[str],
    handler: Callable[[str], str],
    sentinels: Sequence[str] = DEFAULT_SENTINELS
) -> Iterator[str]:
    """
    Apply ``handler`` to each message until a sentinel is received.

    Args:
        lines: Incoming messages, one per line
        handler: Codec operation returning the reply text
        sentinels: Messages that end the session

    Yields:
        One reply per non-blank message before the sentinel
    """
    for count, line in enumerate(lines, 1):
        message = line.strip()
        if not message:
            continue

        if message in sentinels:
            logger.info("Received %r, session closed", message)
            return

        logger.info("Message %d: %s", count, message)
        try:
            yield handler(message)
        except LinkCodecError as e:
            logger.warning("Rejected message %d: %s", count, e)
            yield f"error: {e}"


def _convert(message: str) -> str:
    try:
        value = int(message)
    except ValueError as e:
        raise BitStringError(f"Not a decimal integer: {message!r}") from e

    rendered = convert_all(value)
    return f"binary={rendered['binary']} octal={rendered['octal']} hex={rendered['hex']}"


def build_handler(command: str, config: Dict[str, Any]) -> Callable[[str], str]:
    """Return the per-message function for a CLI sub-command."""
    if command == 'crc':
        codec = build_crc_codec(config)

        def handle_crc(message: str) -> str:
            codeword, remainder = codec.encode_with_remainder(message)
            return f"codeword={codeword} remainder={remainder}"

        return handle_crc
    elif command == 'verify':
        codec = build_crc_codec(config)
        return lambda message: 'valid' if codec.verify(message) else 'invalid'
    elif command == 'hamming':
        return build_hamming_codec(config).encode
    elif command == 'stuff':
        return build_stuffing_codec(config).stuff
    elif command == 'destuff':
        return build_stuffing_codec(config).destuff
    elif command == 'convert':
        return _convert
    else:
        raise ValueError(f"Unknown command: {command}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='linkcodec',
        description='Run link-layer codecs over messages read one per line',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split('Examples:', 1)[1] if __doc__ else None,
    )
    parser.add_argument('command', choices=COMMANDS, help='Codec operation to apply')
    parser.add_argument('--config', default=None, help='Path to YAML configuration')
    parser.add_argument('--generator', default=None, help='CRC generator polynomial bits')
    parser.add_argument('--run-length', type=int, default=None,
                        help='Consecutive ones before a stuffed zero')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log each message')
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None
) -> int:
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        config = load_config(args.config)
        if args.generator is not None:
            config['crc']['generator'] = args.generator
        if args.run_length is not None:
            config['bit_stuffing']['run_length'] = args.run_length

        setup_logging(args.verbose, config)
        handler = build_handler(args.command, config)
    except LinkCodecError as e:
        print(f"error: {e}", file=stderr)
        return 2

    sentinels = tuple(config.get('session', {}).get('sentinels', DEFAULT_SENTINELS))
    for reply in run_session(stdin, handler, sentinels):
        print(reply, file=stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
