"""Find where a colour occurs in an image.

Scans every Nth pixel (default 10) row by row and reports the first
sample with the smallest RGB distance to the colour, as a percentage of
image width and height plus the pixel coordinate and its colour.

Only text and json output are available: there is no palette to export.

Example:
    palette-engine locate photo.png '#3A6EA5' --step 4
"""

from palette_engine.commands._image import load_raster
from palette_engine.core.colour import parse_colour, rgb_to_hex
from palette_engine.core.locator import nearest_sample
from palette_engine.core.types import Command, Position, Report

command = Command(
    name='locate',
    help='Find the sampled pixel nearest to a colour. Output percentage position.',
    produces_palette=False,
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to image file')
    parser.add_argument('colour', help="Colour as '#RRGGBB' or 'r,g,b'")
    parser.add_argument('-s', '--step', type=int, default=None, help='Pixel stride for the search')


@command.run
def run(args, settings, report: Report) -> None:
    target = parse_colour(args.colour)
    raster = load_raster(args.image)
    step = args.step if args.step is not None else settings.sample_step

    report.source = args.image
    report.width = raster.width
    report.height = raster.height

    data: dict = {'hex': rgb_to_hex(*target), 'step': step, 'position': None}
    if not raster.is_empty:
        x, y, distance = nearest_sample(raster, target, step)
        pos = Position(x=x / raster.width * 100, y=y / raster.height * 100)
        data.update(
            {
                'position': {'x': pos.x, 'y': pos.y},
                'x': x,
                'y': y,
                'match': rgb_to_hex(*raster.pixel(x, y)),
                'distance': round(distance, 2),
            }
        )
    report.add('locate', data)
