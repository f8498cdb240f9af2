"""Report builder — text, JSON and CSS output for palette-engine results."""

import json
import os
from typing import Any

from palette_engine.core.types import PaletteEntry, Report


def _entry_line(index: int | str, entry: dict[str, Any]) -> str:
    rgb = entry['rgb']
    hsl = entry['hsl']
    line = (
        f'  {index:<14} {entry["hex"]}  rgb({rgb["r"]}, {rgb["g"]}, {rgb["b"]})'
        f'  hsl({hsl["h"]}, {hsl["s"]}%, {hsl["l"]}%)'
    )
    pos = entry.get('position')
    if pos:
        line += f'  @ ({pos["x"]:.1f}%, {pos["y"]:.1f}%)'
    return line


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.source:
        header = f'palette-engine: {os.path.basename(report.source)}'
        if report.width and report.height:
            header += f' ({report.width}×{report.height})'
        lines.append(header)
        lines.append('')

    # palettes without an image source are shown by their own section
    if report.palette and report.source:
        lines.append(f'── palette ({len(report.palette)} colours)')
        for i, entry in enumerate(report.palette, start=1):
            lines.append(_entry_line(i, entry.to_dict()))
        lines.append('')

    for name, data in report.sections.items():
        if name == 'harmony':
            lines.append(f'── harmony: {data["source"]["hex"]} (±{data["angle"]}°)')
            lines.append(_entry_line('complementary', data['complementary']))
            for entry in data['analogous']:
                lines.append(_entry_line('analogous', entry))
        elif name == 'locate':
            lines.append(f'── locate: {data["hex"]}')
            if data.get('position'):
                pos = data['position']
                lines.append(f'  position: ({pos["x"]:.1f}%, {pos["y"]:.1f}%)  pixel ({data["x"]}, {data["y"]})')
                lines.append(f'  match: {data["match"]}  Δ={data["distance"]}  step={data["step"]}')
            else:
                lines.append('  position: none')
        elif name == 'convert':
            lines.append(f'── convert: {data["input"]}')
            lines.append(f'  hex: {data["hex"]}')
            lines.append(f'  rgb: {data["rgb"]}')
            lines.append(f'  hsl: {data["hsl"]}')
        else:
            # Generic fallback
            lines.append(f'── {name}')
            for k, v in data.items():
                lines.append(f'  {k}: {v}')
        lines.append('')

    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.source:
        obj['source'] = report.source
        obj['dimensions'] = {'width': report.width, 'height': report.height}
    if report.palette:
        obj['palette'] = [entry.to_dict() for entry in report.palette]
    obj.update(report.sections)
    return json.dumps(obj, indent=2)


def export_json(palette: list[PaletteEntry]) -> str:
    """Palette as a JSON array of entries."""
    return json.dumps([entry.to_dict() for entry in palette], indent=2)


def export_css(palette: list[PaletteEntry]) -> str:
    """Palette as CSS custom properties on :root, numbered from 1."""
    lines = [':root {']
    for num, entry in enumerate(palette, start=1):
        r, g, b = entry.rgb
        h, s, lum = entry.hsl
        lines.append(f'  --color-{num}: {entry.hex};')
        lines.append(f'  --color-{num}-rgb: {r}, {g}, {b};')
        lines.append(f'  --color-{num}-hsl: {h}, {s}%, {lum}%;')
    lines.append('}')
    return '\n'.join(lines)


def hex_list(palette: list[PaletteEntry]) -> str:
    """Comma-separated hex codes, as copied by 'copy all'."""
    return ', '.join(entry.hex for entry in palette)
