import random

import numpy as np
import pytest
from PIL import Image

from pathtracer.core.vector import Color, Vector3
from pathtracer.errors import TextureLoadError
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.texture_loader import create_image_material, load_texture
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
    SolidColor,
)
from pathtracer.materials.lambertian import Lambertian

ORIGIN = Vector3(0.0, 0.0, 0.0)
RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


def test_solid_color_ignores_coordinates():
    tex = SolidColor.from_rgb(0.2, 0.4, 0.6)
    assert tex.value(0.0, 0.0, ORIGIN) == Color(0.2, 0.4, 0.6)
    assert tex.value(0.7, 0.1, Vector3(9.0, -3.0, 2.0)) == Color(0.2, 0.4, 0.6)


def test_checker_uses_sign_of_sine_product():
    checker = CheckerTexture(RED, BLUE)
    # sin(1)^3 > 0
    assert checker.value(0.0, 0.0, Vector3(0.1, 0.1, 0.1)) == BLUE
    # one negative factor flips the sign
    assert checker.value(0.0, 0.0, Vector3(-0.1, 0.1, 0.1)) == RED
    # zero product counts as non-negative
    assert checker.value(0.0, 0.0, ORIGIN) == BLUE


def test_checker_accepts_textures():
    checker = CheckerTexture(SolidColor(RED), SolidColor(BLUE))
    assert checker.value(0.3, 0.9, Vector3(-0.1, 0.1, 0.1)) == RED


def test_perlin_noise_is_deterministic_per_instance(rng):
    perlin = Perlin(rng)
    for _ in range(50):
        p = Vector3.random(rng, -20.0, 20.0)
        assert perlin.noise(p) == perlin.noise(p)
        assert perlin.turb(p) == perlin.turb(p)


def test_perlin_same_seed_same_field():
    a = Perlin(random.Random(7))
    b = Perlin(random.Random(7))
    p = Vector3(1.3, -2.7, 0.45)
    assert a.noise(p) == b.noise(p)
    assert np.array_equal(a.perm_x, b.perm_x)


def test_perlin_tables(rng):
    perlin = Perlin(rng)
    for perm in (perlin.perm_x, perlin.perm_y, perlin.perm_z):
        assert sorted(perm.tolist()) == list(range(256))
    lengths = np.linalg.norm(perlin.ranvec, axis=1)
    assert np.allclose(lengths, 1.0)


def test_perlin_noise_vanishes_on_lattice_points(rng):
    perlin = Perlin(rng)
    for p in (Vector3(0.0, 0.0, 0.0), Vector3(3.0, -4.0, 7.0), Vector3(-1.0, 255.0, 256.0)):
        assert perlin.noise(p) == 0.0


def test_perlin_noise_is_bounded_and_varies(rng):
    perlin = Perlin(rng)
    values = [perlin.noise(Vector3.random(rng, -10.0, 10.0)) for _ in range(200)]
    assert all(abs(v) <= 2.0 for v in values)
    assert len(set(values)) > 100
    assert perlin.turb(Vector3(0.3, 0.6, 0.9)) >= 0.0


def test_noise_texture_is_grey_in_unit_range(rng):
    tex = NoiseTexture(4.0, rng)
    for _ in range(50):
        c = tex.value(0.0, 0.0, Vector3.random(rng, -5.0, 5.0))
        assert c.x == c.y == c.z
        assert 0.0 <= c.x <= 1.0


@pytest.fixture
def quad_image(tmp_path):
    # top-left red, top-right green, bottom-left blue, bottom-right white
    data = np.array([[[255, 0, 0], [0, 255, 0]],
                     [[0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
    path = tmp_path / "quad.png"
    Image.fromarray(data).save(path)
    return path


def test_image_texture_flips_v_and_clamps(quad_image):
    tex = ImageTexture(str(quad_image))
    assert (tex.width, tex.height) == (2, 2)
    assert tex.value(0.0, 1.0, ORIGIN) == Color(1.0, 0.0, 0.0)
    assert tex.value(1.0, 1.0, ORIGIN) == Color(0.0, 1.0, 0.0)
    assert tex.value(0.0, 0.0, ORIGIN) == Color(0.0, 0.0, 1.0)
    assert tex.value(1.0, 0.0, ORIGIN) == Color(1.0, 1.0, 1.0)
    # out-of-range coordinates clamp to the border
    assert tex.value(2.0, -1.0, ORIGIN) == Color(1.0, 1.0, 1.0)


def test_image_texture_converts_non_rgb(tmp_path):
    path = tmp_path / "grey.png"
    Image.fromarray(np.full((3, 3), 51, dtype=np.uint8)).save(path)
    c = ImageTexture(str(path)).value(0.5, 0.5, ORIGIN)
    assert c.x == pytest.approx(0.2)
    assert c.x == c.y == c.z


def test_missing_texture_is_fatal(tmp_path):
    missing = tmp_path / "nope.png"
    with pytest.raises(FileNotFoundError):
        ImageTexture(str(missing))
    with pytest.raises(FileNotFoundError):
        load_texture(str(missing))


def test_undecodable_texture(tmp_path):
    path = tmp_path / "bad.png"
    path.write_text("not an image")
    with pytest.raises(TextureLoadError):
        load_texture(str(path))


def test_create_image_material(quad_image):
    material = create_image_material(str(quad_image), Lambertian)
    assert isinstance(material, Lambertian)
    assert isinstance(material.texture, ImageTexture)
