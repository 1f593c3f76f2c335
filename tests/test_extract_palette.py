import json
import sys

import pytest
from PIL import Image

import extract_palette


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', ['extract_palette.py', *args])
    extract_palette.main()


def write_image(path, color=(200, 30, 30)):
    img = Image.new('RGB', (20, 20), color)
    img.paste((40, 60, 160), (0, 0, 10, 20))
    img.save(path)
    return path


def test_text_output(tmp_path, monkeypatch, capsys):
    image = write_image(tmp_path / 'swatch.png')
    run_cli(monkeypatch, '-i', str(image), '--size', 'small')

    out = capsys.readouterr().out
    assert 'swatch.png (2 samples' in out
    assert 'vibrant' in out
    assert '#c81e1e' in out


def test_json_output_for_directory(tmp_path, monkeypatch, capsys):
    write_image(tmp_path / 'a.png')
    write_image(tmp_path / 'b.jpg', color=(30, 200, 90))
    (tmp_path / 'notes.txt').write_text('skip me')

    run_cli(monkeypatch, '--input', str(tmp_path), '--json')

    results = json.loads(capsys.readouterr().out)
    assert [r['image'].rsplit('/', 1)[-1] for r in results] == ['a.png', 'b.jpg']
    assert set(results[0]['variations']) == {
        'vibrant', 'light_vibrant', 'dark_vibrant', 'muted', 'light_muted', 'dark_muted'}


def test_failed_image_exits_with_error(tmp_path, monkeypatch, capsys):
    image = write_image(tmp_path / 'ok.png')
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, '-i', str(image), str(tmp_path / 'missing.png'))

    assert excinfo.value.code == 1
    assert 'missing.png' in capsys.readouterr().err


def test_no_images_exits_with_usage_error(tmp_path, monkeypatch):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, '-i', str(tmp_path))
    assert excinfo.value.code == 2
