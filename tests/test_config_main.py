import logging
import random

import numpy as np
import pytest
from PIL import Image

from pathtracer import main as cli
from pathtracer.config import QUALITY_LEVELS, RenderSettings
from pathtracer.errors import ConfigError, UnknownSceneError
from pathtracer.logging_config import setup_logging
from pathtracer.scenes import SCENES, Scene, build_scene


def test_settings_derive_height():
    settings = RenderSettings(image_width=400, aspect_ratio=16.0 / 9.0)
    assert settings.image_height == 225
    assert RenderSettings(image_width=10, aspect_ratio=100.0).image_height == 1


@pytest.mark.parametrize("field", ["image_width", "samples_per_pixel", "max_depth", "aspect_ratio"])
def test_settings_reject_non_positive(field):
    with pytest.raises(ConfigError):
        RenderSettings(**{field: 0})


def test_quality_presets():
    settings = RenderSettings.from_quality("interactive")
    assert settings.samples_per_pixel == QUALITY_LEVELS["interactive"]["samples"]
    assert settings.max_depth == QUALITY_LEVELS["interactive"]["bounces"]
    custom = RenderSettings.from_quality("balanced", image_width=32, max_depth=3)
    assert custom.image_width == 32
    assert custom.max_depth == 3
    assert custom.samples_per_pixel == QUALITY_LEVELS["balanced"]["samples"]
    with pytest.raises(ConfigError):
        RenderSettings.from_quality("ultra")


@pytest.mark.parametrize("name", sorted(set(SCENES) - {"earth"}))
def test_builtin_scenes_build(name):
    scene = build_scene(name, random.Random(0), RenderSettings())
    assert isinstance(scene, Scene)
    assert len(scene.world) > 0
    assert scene.world.bounding_box(scene.time0, scene.time1) is not None
    camera = scene.make_camera(1.5)
    assert camera.aspect_ratio == 1.5


def test_unknown_scene():
    with pytest.raises(UnknownSceneError):
        build_scene("teapot", random.Random(0), RenderSettings())
    # lookups by name behave like a mapping
    with pytest.raises(KeyError):
        build_scene("teapot", random.Random(0), RenderSettings())


def test_earth_scene_needs_texture(tmp_path):
    with pytest.raises(ConfigError):
        build_scene("earth", random.Random(0), RenderSettings(texture_path=None))
    with pytest.raises(FileNotFoundError):
        build_scene("earth", random.Random(0), RenderSettings(texture_path=str(tmp_path / "x.jpg")))

    path = tmp_path / "earth.png"
    Image.fromarray(np.full((4, 8, 3), 128, dtype=np.uint8)).save(path)
    scene = build_scene("earth", random.Random(0), RenderSettings(texture_path=str(path)))
    assert len(scene.world) == 1


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "logs" / "render.log"
    logger = setup_logging("debug", log_file)
    logger = setup_logging("debug", log_file)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    setup_logging("warning")
    assert len(logger.handlers) == 1


def test_main_writes_ppm(tmp_path):
    out = tmp_path / "render.ppm"
    status = cli.main([
        "--scene", "two_spheres", "--width", "8", "--aspect-ratio", "2",
        "--samples", "1", "--max-depth", "2", "--output", str(out),
        "--log-level", "warning",
    ])
    assert status == 0
    lines = out.read_text().splitlines()
    assert lines[:3] == ["P3", "8 4", "255"]
    assert len(lines) == 3 + 8 * 4


def test_main_writes_stdout(capsys):
    status = cli.main([
        "--scene", "cornell_box", "--width", "4", "--aspect-ratio", "1",
        "--quality", "interactive", "--output", "-", "--log-level", "error",
    ])
    assert status == 0
    stdout = capsys.readouterr().out
    assert stdout.startswith("P3\n4 4\n255\n")


def test_main_reports_errors(tmp_path):
    assert cli.main(["--width", "0", "--log-level", "critical"]) == 1
    assert cli.main([
        "--scene", "earth", "--texture", str(tmp_path / "missing.png"),
        "--width", "4", "--samples", "1", "--log-level", "critical",
    ]) == 1


def test_settings_from_args():
    args = cli.build_parser().parse_args(["--quality", "interactive", "--samples", "3", "--seed", "9"])
    settings = cli.settings_from_args(args)
    assert settings.samples_per_pixel == 3
    assert settings.max_depth == QUALITY_LEVELS["interactive"]["bounces"]
    assert settings.seed == 9


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PATHTRACER_WIDTH", "64")
    monkeypatch.setenv("PATHTRACER_ASPECT_RATIO", "2.0")
    settings = RenderSettings()
    assert settings.image_width == 64
    assert settings.image_height == 32
    # explicit values win over the environment
    assert RenderSettings(image_width=10).image_width == 10


@pytest.mark.parametrize("value", ["abc", "1.5"])
def test_unparseable_environment_is_config_error(monkeypatch, value):
    monkeypatch.setenv("PATHTRACER_SPP", value)
    with pytest.raises(ConfigError):
        RenderSettings()
    assert RenderSettings(samples_per_pixel=2).samples_per_pixel == 2


def test_main_reports_bad_environment(monkeypatch):
    monkeypatch.setenv("PATHTRACER_WIDTH", "0")
    assert cli.main(["--log-level", "critical"]) == 1
    monkeypatch.setenv("PATHTRACER_WIDTH", "wide")
    assert cli.main(["--log-level", "critical"]) == 1


def test_main_reports_output_errors(tmp_path):
    render_args = ["--scene", "two_spheres", "--width", "4", "--samples", "1",
                   "--max-depth", "1", "--log-level", "critical"]
    assert cli.main(render_args + ["--output", str(tmp_path / "render.unknownext")]) == 1
    assert cli.main(render_args + ["--output", str(tmp_path / "missing" / "render.ppm")]) == 1
