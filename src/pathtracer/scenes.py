"""Built-in demo scenes.

Each builder takes the scene random stream and the render settings and
returns a :class:`Scene`. Builders are registered in ``SCENES`` by name.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.errors import ConfigError, UnknownSceneError
from pathtracer.geometry.aarect import XYRect, XZRect, YZRect
from pathtracer.geometry.box import Box
from pathtracer.geometry.instance import RotateY, Translate
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.texture_loader import create_image_material
from pathtracer.materials.textures import CheckerTexture, NoiseTexture
from pathtracer.renderer.raytracer import Background, sky_gradient

logger = logging.getLogger(__name__)

UP = Vector3(0.0, 1.0, 0.0)


@dataclass
class Scene:
    """A world plus the camera placement and background it is meant to be seen with."""

    world: HittableList
    look_from: Point3
    look_at: Point3
    vfov: float = 20.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0
    time1: float = 0.0
    background: Background = sky_gradient

    def make_camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.look_from, self.look_at, UP, self.vfov, aspect_ratio,
                      aperture=self.aperture, focus_dist=self.focus_dist,
                      time0=self.time0, time1=self.time1)


def random_spheres(rng, settings: RenderSettings) -> Scene:
    """Field of small random spheres, some of them moving, around three large ones."""
    world = HittableList()

    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = Color.random(rng) * Color.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Color.random(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    return Scene(world, Point3(13, 2, 3), Point3(0, 0, 0), vfov=20.0,
                 aperture=0.1, focus_dist=10.0, time0=0.0, time1=1.0)


def two_spheres(rng, settings: RenderSettings) -> Scene:
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world = HittableList([
        Sphere(Point3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Point3(0, 10, 0), 10, Lambertian(checker)),
    ])
    return Scene(world, Point3(13, 2, 3), Point3(0, 0, 0))


def _perlin_world(rng) -> HittableList:
    pertext = Lambertian(NoiseTexture(4.0, rng))
    return HittableList([
        Sphere(Point3(0, -1000, 0), 1000, pertext),
        Sphere(Point3(0, 2, 0), 2, pertext),
    ])


def two_perlin_spheres(rng, settings: RenderSettings) -> Scene:
    return Scene(_perlin_world(rng), Point3(13, 2, 3), Point3(0, 0, 0))


def earth(rng, settings: RenderSettings) -> Scene:
    if not settings.texture_path:
        raise ConfigError("The 'earth' scene needs a texture image (--texture)")
    surface = create_image_material(settings.texture_path, Lambertian)
    world = HittableList([Sphere(Point3(0, 0, 0), 2, surface)])
    return Scene(world, Point3(13, 2, 3), Point3(0, 0, 0))


def simple_light(rng, settings: RenderSettings) -> Scene:
    world = _perlin_world(rng)
    world.add(XYRect(3, 5, 1, 3, -2, DiffuseLight(Color(4, 4, 4))))
    return Scene(world, Point3(26, 3, 6), Point3(0, 2, 0),
                 background=Color(0.0, 0.0, 0.0))


def cornell_box(rng, settings: RenderSettings) -> Scene:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color(15, 15, 15))

    world = HittableList()
    world.add(YZRect(0, 555, 0, 555, 555, green))
    world.add(YZRect(0, 555, 0, 555, 0, red))
    world.add(XZRect(213, 343, 227, 332, 554, light))
    world.add(XZRect(0, 555, 0, 555, 0, white))
    world.add(XZRect(0, 555, 0, 555, 555, white))
    world.add(XYRect(0, 555, 0, 555, 555, white))

    tall = Box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    world.add(Translate(RotateY(tall, 15), Vector3(265, 0, 295)))
    short = Box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    world.add(Translate(RotateY(short, -18), Vector3(130, 0, 65)))

    return Scene(world, Point3(278, 278, -800), Point3(278, 278, 0), vfov=40.0,
                 background=Color(0.0, 0.0, 0.0))


SCENES: Dict[str, Callable[..., Scene]] = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
}


def build_scene(name: str, rng, settings: RenderSettings) -> Scene:
    """Look up and build a registered scene."""
    try:
        builder = SCENES[name]
    except KeyError:
        raise UnknownSceneError(
            f"Unknown scene {name!r}; expected one of {sorted(SCENES)}"
        ) from None
    scene = builder(rng, settings)
    logger.info("Built scene %r with %d top-level objects", name, len(scene.world))
    return scene
