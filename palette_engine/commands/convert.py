"""Show a colour as hex, rgb() and hsl().

Example:
    palette-engine convert '#ff5733'
    palette-engine convert 255,87,51
"""

from palette_engine.core.colour import entry_from_rgb, parse_colour
from palette_engine.core.types import Command, Report

command = Command(
    name='convert',
    help='Convert a colour between hex, rgb() and hsl() notation.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colour', help="Colour as '#RRGGBB' or 'r,g,b'")


@command.run
def run(args, settings, report: Report) -> None:
    entry = entry_from_rgb(*parse_colour(args.colour))
    report.palette = [entry]
    report.add(
        'convert',
        {
            'input': args.colour,
            'hex': entry.hex,
            'rgb': entry.rgb_string(),
            'hsl': entry.hsl_string(),
        },
    )
