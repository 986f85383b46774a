# materials/material.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import Texture, as_texture

BLACK = Color(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Every material carries a texture describing its albedo or emission.
    """
    def __init__(self, albedo: Union[Color, Texture, None] = None):
        self.texture = as_texture(albedo) if albedo is not None else None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """Radiance emitted at the hit point. Only lights emit."""
        return BLACK
