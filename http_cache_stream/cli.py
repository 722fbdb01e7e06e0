#!/usr/bin/env python3
"""
HTTP Cache Stream Config Inspector

Builds a global cache configuration from command line options and
prints the result as JSON. Every option goes through the same
validated setters the cache engine relies on, so this doubles as a
quick check of a configuration before deploying it. Logs go to
stderr so stdout carries only the JSON.

Usage:
    python -m http_cache_stream.cli                           # Defaults
    python -m http_cache_stream.cli --cache-dir /var/cache/hcs
    python -m http_cache_stream.cli --max-buffer-size 2000000
    python -m http_cache_stream.cli --request-header "User-Agent:demo"
    python -m http_cache_stream.cli --debug                   # Debug logging

Environment Variables:
    HTTP_CACHE_STREAM_DIR        - Cache directory (default: temp dir)
    HTTP_CACHE_STREAM_DEBUG      - Enable debug mode (true/false)
    HTTP_CACHE_STREAM_LOG_LEVEL  - Log level when not in debug mode
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional, Tuple

from .config.cache_config import (
    DEFAULT_MAX_BUFFER_SIZE,
    DEFAULT_MIN_CHUNK_SIZE,
    ConfigRangeError,
    DefaultGlobalCacheConfig,
    GlobalCacheConfig,
)
from .config.settings import settings

logger = logging.getLogger(__name__)


def parse_header(raw: str) -> Tuple[str, str]:
    """Parse a NAME:VALUE header option."""
    name, sep, value = raw.partition(":")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Invalid header '{raw}'. Expected NAME:VALUE")
    return name, value.strip()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="HTTP Cache Stream: inspect a cache configuration",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--cache-dir",
        type=str,
        default=settings.CACHE_DIR or None,
        help="Cache directory (platform temp dir when unset)",
    )

    parser.add_argument(
        "--max-buffer-size",
        type=int,
        default=DEFAULT_MAX_BUFFER_SIZE,
        help="Bytes buffered in memory before flushing to disk",
    )

    parser.add_argument(
        "--min-chunk-size",
        type=int,
        default=DEFAULT_MIN_CHUNK_SIZE,
        help="Preferred minimum size of emitted chunks in bytes",
    )

    parser.add_argument(
        "--range-split-threshold",
        type=int,
        default=None,
        help="Byte gap before a range request gets its own download stream",
    )

    parser.add_argument(
        "--copy-cached-headers",
        action="store_true",
        help="Copy cached response headers into the response headers",
    )

    parser.add_argument(
        "--validate-outdated",
        action="store_true",
        help="Revalidate outdated cache entries with the server",
    )

    parser.add_argument(
        "--request-header",
        type=parse_header,
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Header sent when downloading (repeatable)",
    )

    parser.add_argument(
        "--response-header",
        type=parse_header,
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Header added to every cached response (repeatable)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def build_config(args: argparse.Namespace) -> GlobalCacheConfig:
    """
    Build a global config from parsed arguments.

    Raises:
        ConfigRangeError: If a size option is out of range
    """
    if args.cache_dir:
        config = GlobalCacheConfig(args.cache_dir)
    else:
        config = asyncio.run(DefaultGlobalCacheConfig.create())

    config.max_buffer_size = args.max_buffer_size
    config.min_chunk_size = args.min_chunk_size
    config.range_request_split_threshold = args.range_split_threshold
    config.copy_cached_response_headers = args.copy_cached_headers
    config.validate_outdated_cache = args.validate_outdated
    config.request_headers = dict(args.request_header)
    config.response_headers = dict(args.response_header)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the config inspector."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    try:
        config = build_config(args)
    except ConfigRangeError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    logger.debug(f"Built {config!r}")
    print(json.dumps(config.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
