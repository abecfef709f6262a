"""
Command Line Interface for image catalog generation.
"""

import argparse
import logging
import os
from typing import List, Optional

from .catalog_builder import CatalogBuilder
from .catalog_config import CatalogConfig
from .catalog_writer import write_bytes_atomic
from .errors import CatalogError, ConfigError
from .generation_progress import GenerationProgress
from .reporter import Reporter
from .selection import SelectionSet


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('imgcatalog')


def get_config(args: argparse.Namespace) -> CatalogConfig:
    """Get catalog configuration with CLI overrides applied."""
    config = CatalogConfig().with_overrides(
        row_height=getattr(args, 'row_height', None),
    )

    errors = config.validate()
    if errors:
        raise ConfigError("; ".join(errors))

    return config


def load_selection(args: argparse.Namespace, logger: logging.Logger) -> Optional[SelectionSet]:
    """Build the selection from CLI paths, or None if a path is unreadable."""
    try:
        selection = SelectionSet.from_paths(args.paths, logger=logger)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return None

    if selection.dropped:
        logger.debug(f"Ignored {selection.dropped} non-image file(s)")
    return selection


def cmd_generate(args: argparse.Namespace) -> int:
    """Execute generate command."""
    logger = setup_logging(args.verbose)

    try:
        config = get_config(args)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    output_path = args.output or config.output_filename
    if os.path.exists(output_path) and not args.force:
        logger.error(f"Output exists: {output_path} (use --force to overwrite)")
        return 1

    selection = load_selection(args, logger)
    if selection is None:
        return 1
    if selection.is_empty:
        logger.error("No images selected; nothing to generate")
        return 1

    logger.info(f"Images: {len(selection)}")
    logger.info(f"Output: {output_path}")
    logger.debug(f"Thumbnail size: {config.thumbnail_size}px, row height: {config.row_height}")

    progress = None
    if not args.quiet:
        progress = GenerationProgress(show_files=args.show_files, logger=logger)

    try:
        builder = CatalogBuilder(config=config, logger=logger)
        result = builder.generate(selection, progress=progress)
        write_bytes_atomic(output_path, result.data)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except CatalogError as e:
        logger.error(f"Error generating Excel file: {e}")
        return 1

    if not args.quiet:
        print()
        Reporter().report_result(result, output_path)

    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Execute list command."""
    logger = setup_logging(args.verbose)

    selection = load_selection(args, logger)
    if selection is None:
        return 1

    Reporter().report_selection(selection)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='imgcatalog',
        description='Organize images into an Excel catalog with thumbnail previews',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflow:
  1. List:     python -m imgcatalog list photos/
  2. Generate: python -m imgcatalog generate photos/ -o images_report.xlsx

Non-image files among the inputs are ignored. Directories contribute their
files in name order; explicit files keep the order given.
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Generate command
    gen_parser = subparsers.add_parser('generate', help='Generate the Excel catalog')
    gen_parser.add_argument('paths', nargs='+', metavar='PATH', help='Image files or directories')
    gen_parser.add_argument('-o', '--output', help='Output workbook (default: images_report.xlsx)')
    gen_parser.add_argument('-f', '--force', action='store_true', help='Overwrite an existing output file')
    gen_parser.add_argument('--row-height', type=float, help='Data row height in points (default: 40)')
    gen_parser.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')
    gen_parser.add_argument('--show-files', action='store_true',
                           help='Print each file as processed with its row')
    gen_parser.add_argument('-v', '--verbose', action='store_true',
                           default=argparse.SUPPRESS, help='Enable verbose logging')

    # List command
    list_parser = subparsers.add_parser('list', help='List the images that would be cataloged')
    list_parser.add_argument('paths', nargs='+', metavar='PATH', help='Image files or directories')
    list_parser.add_argument('-v', '--verbose', action='store_true',
                            default=argparse.SUPPRESS, help='Enable verbose logging')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'generate':
        return cmd_generate(parsed_args)
    elif parsed_args.command == 'list':
        return cmd_list(parsed_args)

    return 1
