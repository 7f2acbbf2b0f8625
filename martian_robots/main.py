#!/usr/bin/env python3
"""
Martian Robots Simulation

Robots move across a bounded grid following L/F/R commands; a robot that
falls off the edge leaves a scent that saves the robots after it.

Usage:
    martian-robots batch INPUT_DIR OUTPUT_DIR [options]
    martian-robots interactive
    martian-robots serve [--host HOST] [--port PORT]

Examples:
    martian-robots batch inputs/ outputs/
    martian-robots batch inputs/ outputs/ --snapshot --gif --workers 8
    martian-robots --config configs/mission.yaml batch inputs/ outputs/ --quiet
    martian-robots serve --port 8080
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, load_config
from .logging_setup import configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='martian-robots',
        description='Martian Robots fleet simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    martian-robots batch inputs/ outputs/
    martian-robots batch inputs/ outputs/ --snapshot --gif --workers 8
    martian-robots serve --port 8080
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Batch processing
    batch = subparsers.add_parser('batch', help='Process every input file in a folder')
    batch.add_argument('input_dir', type=Path, help='Folder with input files')
    batch.add_argument('output_dir', type=Path, help='Folder for result files')
    batch.add_argument('--pattern', default=None,
                       help='Input file glob (default: *.txt)')
    batch.add_argument('--workers', type=int, default=None,
                       help='Number of worker processes')

    batch.add_argument('--csv', dest='csv', action='store_true', default=None,
                       help='Enable per-robot CSV export (default)')
    batch.add_argument('--no-csv', dest='csv', action='store_false',
                       help='Disable per-robot CSV export')

    batch.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                       help='Enable final surface snapshot')
    batch.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                       help='Disable final surface snapshot (default)')

    batch.add_argument('--gif', action='store_true', default=False,
                       help='Enable GIF animation export')

    batch.add_argument('--report', dest='report', action='store_true', default=None,
                       help='Enable text summary report (default)')
    batch.add_argument('--no-report', dest='report', action='store_false',
                       help='Disable text summary report')

    # Interactive prompt
    subparsers.add_parser('interactive', help='Run a simulation from prompted input')

    # HTTP server
    serve = subparsers.add_parser('serve', help='Serve the simulation over HTTP')
    serve.add_argument('--host', default=None, help='Bind address')
    serve.add_argument('--port', type=int, default=None, help='Bind port')

    return parser.parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply CLI overrides on top of the loaded configuration."""
    config.quiet = args.quiet
    if args.log_level is not None:
        config.logging.level = args.log_level

    if args.command == 'batch':
        if args.pattern is not None:
            config.batch.pattern = args.pattern
        if args.workers is not None:
            config.batch.workers = args.workers
        if args.csv is not None:
            config.export.csv = args.csv
        if args.snapshot is not None:
            config.export.snapshot = args.snapshot
        if args.gif:
            config.export.gif = True
        if args.report is not None:
            config.export.report = args.report

    elif args.command == 'serve':
        if args.host is not None:
            config.server.host = args.host
        if args.port is not None:
            config.server.port = args.port

    return config


def run_batch(config: AppConfig, args: argparse.Namespace) -> int:
    from .batch import process_directory

    if not config.quiet:
        print(f"Processing {args.input_dir / config.batch.pattern}...")
        print(f"  Workers: {config.batch.workers}")

    try:
        results = process_directory(
            args.input_dir, args.output_dir,
            pattern=config.batch.pattern,
            workers=config.batch.workers,
            export=config.export,
            suffix=config.batch.output_suffix,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    failed = [r for r in results if not r.ok]

    if not config.quiet:
        for result in results:
            if result.ok and result.output_path is not None:
                stats = result.statistics
                print(f"  {result.input_path.name}: {stats.total_robots} robots, "
                      f"{stats.dead_count} lost -> {result.output_path}")
            elif result.ok:
                print(f"  {result.input_path.name}: empty, skipped")
        print(f"\nDone: {len(results) - len(failed)}/{len(results)} files succeeded.")

    for result in failed:
        print(f"Error: {result.error}", file=sys.stderr)

    return 1 if failed else 0


def run_interactive(config: AppConfig) -> int:
    from .repl import InteractiveSession

    try:
        InteractiveSession().run()
    except (KeyboardInterrupt, EOFError):
        if not config.quiet:
            print("\nSession interrupted by user.")
    return 0


def run_server(config: AppConfig) -> int:
    import uvicorn
    from .api import create_app

    numeric = getattr(logging, config.logging.level.upper())
    log_level = logging.getLevelName(numeric).lower()
    if not config.quiet:
        print(f"Serving on http://{config.server.host}:{config.server.port}")
    uvicorn.run(create_app(), host=config.server.host, port=config.server.port,
                log_level=log_level)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except (ValueError, TypeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    config = apply_overrides(config, args)

    try:
        configure_logging(config.logging.level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == 'batch':
        return run_batch(config, args)
    if args.command == 'interactive':
        return run_interactive(config)
    return run_server(config)


if __name__ == '__main__':
    sys.exit(main())
