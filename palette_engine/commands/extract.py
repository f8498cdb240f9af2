"""Extract a palette of dominant colours from an image.

Quantizes the image to K colours (default 6, range 3-12), then finds where
each colour occurs by nearest-match search over every Nth pixel (default
step 10). Position lookups run in parallel, one per colour. Entries keep
the quantizer's order, most representative first.

The first colour is selected by default and its complementary and
analogous colours are added to the report. Use --select to pick another.

Formats:
  text     human-readable table (default)
  json     palette and harmony as JSON
  palette  JSON array of palette entries (hex, rgb, hsl, position)
  css      :root custom properties (--color-N, --color-N-rgb, --color-N-hsl)
  hex      comma-separated hex codes

Example:
    palette-engine extract photo.png -k 8
    palette-engine extract photo.png --quantizer histogram --format css
"""

from palette_engine.commands._image import load_raster
from palette_engine.core.assembler import MAX_COLOR_COUNT, MIN_COLOR_COUNT, extract_palette
from palette_engine.core.harmony import suggest
from palette_engine.core.quantizers import QUANTIZERS, get_quantizer
from palette_engine.core.types import Command, Report

command = Command(
    name='extract',
    help='Extract dominant colours from an image, with positions and harmonies.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to image file (PNG/JPG/GIF/WebP)')
    parser.add_argument(
        '-k',
        '--count',
        type=int,
        default=None,
        help=f'Number of colours to extract ({MIN_COLOR_COUNT}-{MAX_COLOR_COUNT})',
    )
    parser.add_argument('-q', '--quantizer', choices=sorted(QUANTIZERS), default=None)
    parser.add_argument('-s', '--step', type=int, default=None, help='Pixel stride for position search')
    parser.add_argument('--select', type=int, default=1, metavar='N', help='1-based colour to derive harmonies from')
    parser.add_argument('--no-harmony', action='store_true', help='Do not add harmony colours')


@command.run
def run(args, settings, report: Report) -> None:
    raster = load_raster(args.image)
    k = args.count if args.count is not None else settings.color_count
    step = args.step if args.step is not None else settings.sample_step
    quantizer = get_quantizer(args.quantizer or settings.quantizer)

    palette = extract_palette(raster, quantizer, k, step=step, max_workers=settings.max_workers)

    report.source = args.image
    report.width = raster.width
    report.height = raster.height
    report.palette = palette

    if args.no_harmony:
        return
    if not 1 <= args.select <= len(palette):
        raise ValueError(f'--select must be between 1 and {len(palette)}, got {args.select}')
    harmony = suggest(palette[args.select - 1], settings.analogous_angle)
    report.add('harmony', harmony.to_dict())
