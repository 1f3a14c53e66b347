#!/usr/bin/env python3
"""
Command-line interface for Critical CSS.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import validators

from critical_css.runner import CriticalCSSJob, generate
from critical_css.utils.config import DEFAULT_WIDTH, DEFAULT_HEIGHT, RENDER_WAIT_TIME
from critical_css.utils.error import ConfigurationError, CriticalCSSError
from critical_css.utils.logging import setup_logging

def positive_int(value: str) -> int:
    """Argument type for pixel sizes and limits."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Parsing error: {value!r} is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Parsing error: {value!r} must be positive")
    return number

def validate_url(url: str) -> bool:
    """Validate URL format."""
    if url.startswith('file://'):
        return True
    if not validators.url(url):
        raise ConfigurationError(f"Invalid URL format: {url}")
    return True

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='critical-css',
        description='Extract the critical path (above the fold) CSS of web pages'
    )

    parser.add_argument(
        'css_file',
        help='Stylesheet to filter'
    )
    parser.add_argument(
        'urls',
        help='Page(s) to test the stylesheet against',
        nargs='+'
    )

    # Viewport options
    parser.add_argument(
        '--width',
        help='Viewport width in pixels',
        type=positive_int,
        default=DEFAULT_WIDTH
    )
    parser.add_argument(
        '--height',
        help='Viewport height in pixels, the fold',
        type=positive_int,
        default=DEFAULT_HEIGHT
    )
    parser.add_argument(
        '--render-wait',
        help='Seconds to let the page settle after load',
        type=float,
        default=RENDER_WAIT_TIME
    )

    # Output options
    parser.add_argument(
        '-o', '--output-dir',
        help='Directory for critical-<n>.css files when several urls are given',
        default='.'
    )
    parser.add_argument(
        '--minify',
        help='Minify the generated CSS',
        action='store_true'
    )
    parser.add_argument(
        '--report',
        help='Write a JSON report of the filtering passes to this file'
    )

    # Resource options
    parser.add_argument(
        '--memory-limit',
        help='Memory limit in MB',
        type=positive_int
    )

    # Other options
    parser.add_argument(
        '--log-file',
        help='Also write log output to this file'
    )
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )

    return parser.parse_args(argv)

def build_job(args: argparse.Namespace) -> CriticalCSSJob:
    """Turn parsed arguments into a job."""
    for url in args.urls:
        validate_url(url)
    if args.render_wait < 0:
        raise ConfigurationError("Render wait cannot be negative")

    return CriticalCSSJob(
        css_file=args.css_file,
        urls=list(args.urls),
        width=args.width,
        height=args.height,
        minify=args.minify,
        output_dir=args.output_dir,
        report_file=args.report,
        render_wait=args.render_wait,
        memory_limit=args.memory_limit * 1024 * 1024 if args.memory_limit else None
    )

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        job = build_job(args)
        asyncio.run(generate(job))
        return 0
    except CriticalCSSError as e:
        logging.error(f"Error: {str(e)}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
