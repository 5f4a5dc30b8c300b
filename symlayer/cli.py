#!/usr/bin/env python3
"""
symlayer CLI: type 2-beolsik Hangul with Latin keys

    $ symlayer dkssudgktpdy
    안녕하세요
"""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import os
import sys
import traceback
from pathlib import Path

from symlayer.__version__ import __version__

# Global logger instance
logger = None


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Setup logging to both console and file

    Args:
        debug: Enable debug level logging
        log_file: Path to log file (default: ~/.symlayer.log)
    """
    global logger

    if logger is not None:
        return logger

    import symlayer.log  # registers TRACE level

    logger = logging.getLogger('symlayer')
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if log_file is None:
        log_file = os.path.expanduser('~/.symlayer.log')

    fmt = logging.Formatter(
        '[%(asctime)s] %(levelname)-8s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # File handler (rotate log file when it gets too large)
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1 MB
            backupCount=3
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    # Console handler (only warnings in production, all in debug)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    return logger


def compose_text(latin: str) -> str:
    """Run *latin* through a HangulComposer and return the finalized text."""
    from symlayer.hangul.composer import HangulComposer
    from symlayer.sink import RecordingSink

    sink = RecordingSink()
    composer = HangulComposer(sink)
    for ch in latin:
        if ch in (' ', '\n'):
            composer.handle_space_or_enter(ch)
        elif ch == '\b':
            composer.backspace()
        else:
            composer.input_latin_char(ch)
    composer.reset()
    return sink.committed


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='symlayer',
        description='Compose Hangul from Latin 2-beolsik key sequences',
    )
    parser.add_argument(
        'text',
        nargs='*',
        help='Latin key sequence(s); read from stdin when omitted'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Path to log file (default: ~/.symlayer.log)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for symlayer"""
    args = parse_args(argv)

    from symlayer.config import load_config

    config = load_config(args.config, args.debug)
    log = setup_logging(debug=args.debug or config['debug'], log_file=args.logfile)
    log.debug("symlayer %s, config: %s", __version__, config)

    try:
        if args.text:
            print(compose_text(' '.join(args.text)))
        else:
            for line in sys.stdin:
                print(compose_text(line.rstrip('\n')))
        return 0

    except KeyboardInterrupt:
        return 0

    except BrokenPipeError:
        log.error("Broken pipe error - pipeline was closed")
        return 1

    except Exception as e:
        log.error(f"Unhandled error: {type(e).__name__}: {e}")
        log.debug(traceback.format_exc())
        return 1


if __name__ == '__main__':
    sys.exit(main())
