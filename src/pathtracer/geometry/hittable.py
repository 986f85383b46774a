# geometry/hittable.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB

class HitRecord:
    """
    Records details of a ray-object intersection.

    The record is built from the geometric (outward) normal and the incoming
    ray; the stored normal always points against the ray. Wrappers that move
    or rotate a hit build a new record instead of mutating this one.
    """
    __slots__ = ("t", "p", "normal", "u", "v", "front_face", "material")

    def __init__(self, ray: Ray, t: float, p: Vector3, outward_normal: Vector3,
                 u: float = 0.0, v: float = 0.0, material=None):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.u = u              # Surface coordinates
        self.v = v
        self.material = material
        # Whether the hit was on the outside of the surface
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    @property
    def outward_normal(self) -> Vector3:
        """The geometric normal as reported by the surface."""
        return self.normal if self.front_face else -self.normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Closest intersection strictly inside (t_min, t_max), or None."""
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """Box enclosing the object over [time0, time1], or None if unbounded."""
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
