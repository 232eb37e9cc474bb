"""Main CLI entry point for mimewords."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from mimewords.config.config_loader import ConfigError, ConfigLoader
from mimewords.logging_utils import configure_logging
from mimewords.services.decoding.header_decoder import HeaderDecoder
from mimewords.services.headers.header_extractor import HeaderExtractor
from mimewords.services.headers.base import HeaderParseError


def build_decoder(config_path: Optional[Path] = None, verbose: bool = False) -> tuple[HeaderDecoder, ConfigLoader]:
    """
    Load configuration, set up logging and create the decoder.

    Args:
        config_path: Optional custom config file path
        verbose: Enable debug logging

    Returns:
        Tuple of (decoder, config loader)
    """
    config_loader = ConfigLoader(config_path)
    config = config_loader.load_app_config()

    configure_logging(verbose, config.logging.level)

    return HeaderDecoder(settings=config.decoder), config_loader


def cmd_text(args) -> int:
    """Decode '*text' header values command."""
    decoder, _ = build_decoder(args.config, args.verbose)

    for value in args.values:
        print(decoder.decode_text(value))

    return 0


def cmd_phrase(args) -> int:
    """Decode a phrase command."""
    decoder, _ = build_decoder(args.config, args.verbose)

    phrase, cursor = decoder.decode_phrase(args.value, args.cursor)
    print(phrase)
    print(f"cursor: {cursor}")

    return 0


def cmd_headers(args) -> int:
    """Decode header fields of email files command."""
    decoder, config_loader = build_decoder(args.config, args.verbose)
    extractor = HeaderExtractor(decoder, config_loader.load_app_config().header_fields)

    status = 0
    for email_path in args.emails:
        try:
            headers = extractor.extract_from_file(email_path)
        except (FileNotFoundError, HeaderParseError) as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 1
            continue

        if len(args.emails) > 1:
            print(f"==> {email_path} <==")
        for name, values in headers.items():
            for value in values:
                print(f"{name}: {value}")

    return status


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="mimewords - Decode RFC 2047 encoded MIME headers")
    parser.add_argument("--config", type=Path, help="Custom config file path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    text_parser = subparsers.add_parser("text", help="Decode '*text' header values (Subject, Comments)")
    text_parser.add_argument("values", nargs="+", help="Raw header value(s)")
    text_parser.set_defaults(func=cmd_text)

    phrase_parser = subparsers.add_parser("phrase", help="Decode a phrase (display name)")
    phrase_parser.add_argument("value", help="Raw header value")
    phrase_parser.add_argument("--cursor", type=int, default=0, help="Start position")
    phrase_parser.set_defaults(func=cmd_phrase)

    headers_parser = subparsers.add_parser("headers", help="Decode header fields of email files")
    headers_parser.add_argument("emails", nargs="+", type=Path, help="Email file(s) to read")
    headers_parser.set_defaults(func=cmd_headers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (ConfigError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
