"""Integration tests: generate images with Pillow, run the palette-engine CLI against them."""

import json
from pathlib import Path

import pytest
from palette_engine.__main__ import main
from palette_engine.core.types import Command
from palette_engine.registry import discover
from PIL import Image


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated cwd: no .env above it, no PALETTE_* variables."""
    for name in ['COLOR_COUNT', 'SAMPLE_STEP', 'ANALOGOUS_ANGLE', 'QUANTIZER', 'MAX_WORKERS']:
        monkeypatch.delenv(f'PALETTE_{name}', raising=False)
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def stripes(workdir: Path) -> Path:
    """100x100 PNG: red rows 0-59, blue rows 60-99."""
    image = Image.new('RGB', (100, 100), (0, 0, 255))
    image.paste((255, 0, 0), (0, 0, 100, 60))
    path = workdir / 'stripes.png'
    image.save(path)
    return path


class TestRegistry:
    def test_discovers_commands(self):
        assert {'extract', 'harmony', 'locate', 'convert'} <= set(discover())

    def test_skips_helper_modules(self):
        commands = discover()
        assert '_image' not in commands
        assert all(isinstance(cmd, Command) for cmd in commands.values())


class TestExtract:
    def test_hex_list(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['extract', str(stripes), '-q', 'histogram', '-k', '3', '-f', 'hex'])
        assert capsys.readouterr().out.strip() == '#F01010, #1010F0'

    def test_json_with_positions_and_harmony(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['extract', str(stripes), '-k', '3', '-f', 'json'])
        data = json.loads(capsys.readouterr().out)
        assert [e['hex'] for e in data['palette']] == ['#FF0000', '#0000FF']
        assert data['palette'][1]['position'] == {'x': 0.0, 'y': 60.0}
        assert data['harmony']['complementary']['hex'] == '#00FFFF'
        assert data['dimensions'] == {'width': 100, 'height': 100}

    def test_select_second_colour(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['extract', str(stripes), '-k', '3', '--select', '2', '-f', 'json'])
        data = json.loads(capsys.readouterr().out)
        assert data['harmony']['source']['hex'] == '#0000FF'
        assert data['harmony']['complementary']['hex'] == '#FFFF00'

    def test_css(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['extract', str(stripes), '-k', '3', '-f', 'css'])
        out = capsys.readouterr().out
        assert '--color-1: #FF0000;' in out
        assert '--color-2-hsl: 240, 100%, 50%;' in out

    def test_palette_export(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['extract', str(stripes), '-k', '3', '-f', 'palette'])
        data = json.loads(capsys.readouterr().out)
        assert [e['hex'] for e in data] == ['#FF0000', '#0000FF']
        assert data[0]['position'] == {'x': 0.0, 'y': 0.0}
        assert data[1]['hsl'] == {'h': 240, 's': 100, 'l': 50}

    def test_count_from_dotenv(self, stripes: Path, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workdir / '.env').write_text('PALETTE_QUANTIZER=histogram\n')
        main(['extract', str(stripes), '-f', 'hex'])
        assert capsys.readouterr().out.strip() == '#F01010, #1010F0'

    def test_count_out_of_range(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['extract', str(stripes), '-k', '20'])
        assert exc.value.code == 1
        assert 'colour count' in capsys.readouterr().err

    def test_missing_image(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['extract', str(workdir / 'nope.png')])
        assert exc.value.code == 1
        assert 'image not found' in capsys.readouterr().err


class TestHarmony:
    def test_text(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['harmony', '#ff5733'])
        out = capsys.readouterr().out
        assert '── harmony: #FF5733 (±30°)' in out
        assert 'hsl(191, 100%, 60%)' in out

    def test_custom_angle_json(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['harmony', '#FF5733', '--angle', '45', '-f', 'json'])
        data = json.loads(capsys.readouterr().out)
        assert [e['hsl']['h'] for e in data['harmony']['analogous']] == [326, 56]

    def test_bad_hex(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['harmony', '#FFF'])
        assert exc.value.code == 1
        assert 'Invalid hex colour' in capsys.readouterr().err

    def test_hex_list(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['harmony', '#FF0000', '-f', 'hex'])
        hexes = capsys.readouterr().out.strip().split(', ')
        assert len(hexes) == 3
        assert hexes[0] == '#00FFFF'


class TestLocate:
    def test_position(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['locate', str(stripes), '#0000FF', '-f', 'json'])
        data = json.loads(capsys.readouterr().out)
        assert data['locate']['position'] == {'x': 0.0, 'y': 60.0}
        assert (data['locate']['x'], data['locate']['y'], data['locate']['distance']) == (0, 60, 0.0)
        assert data['locate']['match'] == '#0000FF'

    @pytest.mark.parametrize('fmt', ['css', 'hex', 'palette'])
    def test_palette_formats_rejected(self, stripes: Path, fmt: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['locate', str(stripes), '#0000FF', '-f', fmt])
        assert exc.value.code == 2
        assert 'invalid choice' in capsys.readouterr().err

    def test_text_shows_match(self, stripes: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['locate', str(stripes), '10,0,250'])
        assert 'match: #0000FF' in capsys.readouterr().out


class TestConvert:
    def test_rgb_triple(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['convert', '255,87,51', '-f', 'json'])
        data = json.loads(capsys.readouterr().out)
        assert data['convert'] == {
            'input': '255,87,51',
            'hex': '#FF5733',
            'rgb': 'rgb(255, 87, 51)',
            'hsl': 'hsl(11, 100%, 60%)',
        }

    def test_invalid_channel(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['convert', '256,0,0'])
        assert exc.value.code == 1
        assert 'Invalid r channel' in capsys.readouterr().err


class TestHelp:
    def test_lists_commands(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        assert 'extract' in out
        assert 'locate' in out

    def test_command_docs(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'locate'])
        assert 'Find where a colour occurs in an image.' in capsys.readouterr().out
