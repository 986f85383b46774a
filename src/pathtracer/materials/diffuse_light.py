# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture

class DiffuseLight(Material):
    """
    Emissive material. The texture can be used to create patterns in the
    emitted light; both sides of the surface emit.
    """
    def __init__(self, emit: Union[Color, Texture]):
        super().__init__(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Color]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        return self.texture.value(u, v, p)
