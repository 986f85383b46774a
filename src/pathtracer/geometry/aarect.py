# geometry/aarect.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import ieee_div
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness given to the degenerate axis of a rectangle's bounding box.
RECT_BOX_PADDING = 0.0001

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane `normal_axis = k`, spanning [a0, a1] along
    axis_a and [b0, b1] along axis_b. Subclasses fix the three axes.
    """
    axis_a = 0
    axis_b = 1
    normal_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _point(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.axis_a] = a
        coords[self.axis_b] = b
        coords[self.normal_axis] = k
        return Vector3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        direction = ray.direction[self.normal_axis]
        if direction == 0.0:
            # Parallel to the plane
            return None
        t = (self.k - ray.origin[self.normal_axis]) / direction
        if not (t_min < t < t_max):
            return None

        a = ray.origin[self.axis_a] + t * ray.direction[self.axis_a]
        b = ray.origin[self.axis_b] + t * ray.direction[self.axis_b]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        # A zero-width side gives NaN texture coordinates rather than an error
        u = ieee_div(a - self.a0, self.a1 - self.a0)
        v = ieee_div(b - self.b0, self.b1 - self.b0)
        outward_normal = self._point(0.0, 0.0, 1.0)
        return HitRecord(ray, t, ray.at(t), outward_normal, u, v, self.material)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        # Pad the flat axis so the box has non-zero thickness.
        return AABB(self._point(self.a0, self.b0, self.k - RECT_BOX_PADDING),
                    self._point(self.a1, self.b1, self.k + RECT_BOX_PADDING))

class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k."""
    axis_a, axis_b, normal_axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k."""
    axis_a, axis_b, normal_axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k."""
    axis_a, axis_b, normal_axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
