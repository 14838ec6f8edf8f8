import pytest
from PIL import Image

from tesseract.export import export_gif, render_frames
from tesseract.main import build_parser, main


def test_render_frames_returns_one_image_per_frame():
    frames = render_frames(num_frames=4, width=64, height=48)

    assert len(frames) == 4
    assert all(frame.size == (64, 48) for frame in frames)


def test_render_frames_rejects_bad_arguments():
    with pytest.raises(ValueError):
        render_frames(num_frames=0)
    with pytest.raises(ValueError):
        render_frames(num_frames=2, width=0, height=10)


def test_export_gif_writes_animation(tmp_path, capsys):
    output = tmp_path / "tesseract.gif"

    result = export_gif(output, num_frames=3, width=64, height=48, duration_ms=20)

    assert result == output
    with Image.open(output) as image:
        assert image.format == "GIF"
        assert image.size == (64, 48)
    assert "with 3 frames" in capsys.readouterr().out


def test_cli_export(tmp_path):
    output = tmp_path / "cli.gif"

    main(["--export", str(output), "--frames", "2", "--width", "32", "--height", "24"])

    assert output.exists()


def test_cli_rejects_non_positive_values():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--frames", "0"])
    with pytest.raises(SystemExit):
        parser.parse_args(["--width", "-5"])


def test_cli_defaults():
    args = build_parser().parse_args([])
    assert args.export is None
    assert (args.width, args.height, args.fps) == (960, 540, 60)
