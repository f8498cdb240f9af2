"""Complementary and analogous colours for one colour.

Complementary rotates the hue by 180°. Analogous rotates by -angle and
+angle (default 30°, or PALETTE_ANALOGOUS_ANGLE), in that order.
Saturation and lightness are unchanged.

Example:
    palette-engine harmony '#FF5733'
    palette-engine harmony 'rgb(255, 87, 51)' --angle 45 --format json
"""

from palette_engine.core.colour import entry_from_rgb, parse_colour
from palette_engine.core.harmony import suggest
from palette_engine.core.types import Command, Report

command = Command(
    name='harmony',
    help='Complementary and analogous colours for a hex or rgb colour.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colour', help="Colour as '#RRGGBB' or 'r,g,b'")
    parser.add_argument('-a', '--angle', type=int, default=None, help='Analogous hue offset in degrees')


@command.run
def run(args, settings, report: Report) -> None:
    entry = entry_from_rgb(*parse_colour(args.colour))
    angle = args.angle if args.angle is not None else settings.analogous_angle
    harmony = suggest(entry, angle)
    report.palette = [harmony.complementary, *harmony.analogous]
    report.add('harmony', harmony.to_dict())
