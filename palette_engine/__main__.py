"""palette-engine — Extract colour palettes from images, locate colours, derive harmonies.

Usage: palette-engine <command> [args] [options]

Commands are auto-discovered from palette_engine/commands/.
Each command module's docstring is its documentation.
Run `palette-engine help <command>` for full module docs.

Settings / .env loading:
  OS environment variables are always used first.
  If a PALETTE_* variable is not set, palette-engine looks for a .env file
  starting from the current directory and walking up, stopping at the
  nearest .git boundary. Use --env-file to name the .env file explicitly.
"""

import argparse
import importlib
import logging
import sys

from palette_engine import registry
from palette_engine.commands._image import ImageLoadError
from palette_engine.core.config import load_settings
from palette_engine.core.errors import PaletteError
from palette_engine.core.report import export_css, export_json, format_json, format_text, hex_list
from palette_engine.core.types import Report

logger = logging.getLogger('palette_engine')

REPORT_FORMATS = ('text', 'json')
# only for commands that produce a palette
PALETTE_FORMATS = ('palette', 'css', 'hex')


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'palette_engine.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  palette-engine extract photo.png\n'
        '  palette-engine extract photo.png -k 8 --format css\n'
        '  palette-engine extract photo.png --quantizer histogram --format json\n'
        '  palette-engine extract photo.png --format palette > palette.json\n'
        "  palette-engine locate photo.png '#3A6EA5'\n"
        "  palette-engine harmony '#FF5733' --angle 45\n"
        '  palette-engine convert 255,87,51\n'
        '  palette-engine help extract\n'
        '\n'
        'Settings (env vars or .env):\n'
        '  PALETTE_COLOR_COUNT=6  PALETTE_SAMPLE_STEP=10  PALETTE_ANALOGOUS_ANGLE=30\n'
        '  PALETTE_QUANTIZER=kmeans|histogram  PALETTE_MAX_WORKERS=N\n'
    )
    parser = argparse.ArgumentParser(
        prog='palette-engine',
        description='Extract colour palettes from images, locate colours, derive harmonies.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        cmd.add_arguments(p)
        formats = REPORT_FORMATS + PALETTE_FORMATS if cmd.produces_palette else REPORT_FORMATS
        p.add_argument('-f', '--format', choices=formats, default='text', help='Output format (default: text)')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: palette-engine help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')


def _render(report: Report, fmt: str) -> str:
    if fmt == 'json':
        return format_json(report)
    if fmt == 'palette':
        return export_json(report.palette)
    if fmt == 'css':
        return export_css(report.palette)
    if fmt == 'hex':
        return hex_list(report.palette)
    return format_text(report)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='palette-engine: %(message)s',
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        settings = load_settings(env_file=args.env_file)
        if settings.source:
            logger.info('loaded %s', settings.source)

        report = Report()
        registry.get(args.command).execute(args, settings, report)
    except (PaletteError, ImageLoadError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    print(_render(report, args.format))


if __name__ == '__main__':
    main()
