"""Main CLI entry point for fillin."""

import argparse
import sys
from typing import Optional

from .commands import render_template


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the fillin CLI."""
    parser = argparse.ArgumentParser(
        prog='fillin',
        description='Fill-in template interpreter'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    render_parser = subparsers.add_parser('render', help='Interpret a template')
    render_parser.add_argument(
        'template',
        type=str,
        help='Template name (searched on the template path) or absolute path'
    )
    render_parser.add_argument(
        '--var',
        action='append',
        metavar='KEY=VALUE',
        help='Template variable for [[$KEY]] (can be specified multiple times)'
    )
    render_parser.add_argument(
        '--vars-file',
        type=str,
        help='Path to a JSON or YAML file containing template variables'
    )
    render_parser.add_argument(
        '--config',
        type=str,
        help='Path to a YAML config file'
    )
    render_parser.add_argument(
        '--template-path',
        action='append',
        metavar='DIR',
        help='Directory to search for templates (can be specified multiple times)'
    )
    render_parser.add_argument(
        '--left-delim',
        type=str,
        help='Left delimiter (default: [[)'
    )
    render_parser.add_argument(
        '--right-delim',
        type=str,
        help='Right delimiter (default: ]])'
    )
    render_parser.add_argument(
        '--output',
        type=str,
        metavar='FILE',
        help='Write output to FILE instead of stdout'
    )
    render_parser.add_argument(
        '--collect',
        action='store_true',
        help='Interpret fully before writing instead of streaming'
    )
    render_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    render_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    render_parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'render':
        return render_template(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
