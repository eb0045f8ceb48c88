#!/usr/bin/env python3
"""
Tailwind Prefixer
Main entry point for the application.

Adds the prefix from tailwind.config.js to every Tailwind class used in
className attributes under ./src, or replaces an old prefix with it.
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from core.class_prefixer import ClassPrefixer
from core.file_processor import process_files
from tailwind.config_reader import DEFAULT_CONFIG_PATH, TailwindConfigReader
from utils.file_utils import DEFAULT_EXTENSIONS, normalize_path

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Add or replace the Tailwind CSS prefix on classes in className attributes.'
    )
    parser.add_argument('old_prefix', nargs='?', default=None,
                        help='old prefix to replace (omit for a first-time prefix application)')
    parser.add_argument('--prefix', default=None,
                        help='new prefix to apply (default: the "prefix" field of the Tailwind config)')
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH,
                        help=f'Tailwind config file (default: {DEFAULT_CONFIG_PATH})')
    parser.add_argument('--src', default='./src',
                        help='directory to process recursively (default: ./src)')
    parser.add_argument('--ext', action='append', dest='extensions', metavar='EXT',
                        help=f'file extension to rewrite, repeatable (default: {" ".join(DEFAULT_EXTENSIONS)})')
    parser.add_argument('--attribute', action='append', dest='attributes', metavar='NAME',
                        help='attribute holding the classes, repeatable (default: className)')
    parser.add_argument('--dry-run', action='store_true',
                        help='print a diff of each change instead of writing files')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    return parser.parse_args(argv)

def resolve_new_prefix(args: argparse.Namespace) -> str:
    """Take the new prefix from the command line, falling back to the Tailwind config."""
    if args.prefix is not None:
        return args.prefix
    reader = TailwindConfigReader()
    reader.read_config(args.config)
    return reader.get_prefix()

def run(args: argparse.Namespace) -> List[Path]:
    new_prefix = resolve_new_prefix(args)
    old_prefix = args.old_prefix or None

    if not new_prefix and not old_prefix:
        logger.info("No prefix to add or replace.")
        return []

    if old_prefix:
        logger.info(f'Old prefix: "{old_prefix}"')
    logger.info(f'New prefix: "{new_prefix}"')

    src_dir = normalize_path(args.src)
    prefixer = ClassPrefixer(args.attributes or ('className',))
    return process_files(
        src_dir,
        new_prefix,
        old_prefix,
        extensions=args.extensions or DEFAULT_EXTENSIONS,
        dry_run=args.dry_run,
        prefixer=prefixer,
    )

def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        run(args)
    except Exception as e:
        logger.error(f"Error during script execution: {str(e)}", exc_info=True)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
