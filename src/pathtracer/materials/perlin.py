# materials/perlin.py
import math
import numpy as np
from numba import njit
from pathtracer.core.vector import Vector3

POINT_COUNT = 256

@njit
def perlin_noise_kernel(ranvec, perm_x, perm_y, perm_z, x, y, z):
    """
    Gradient noise at (x, y, z): smoothstep-weighted trilinear blend of the
    eight lattice gradients dotted with their offset vectors.
    """
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the fractional offsets
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) & 255] ^ perm_y[(j + dj) & 255] ^ perm_z[(k + dk) & 255]
                gx = ranvec[idx, 0]
                gy = ranvec[idx, 1]
                gz = ranvec[idx, 2]
                dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum

@njit
def turbulence_kernel(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    """Sum of `depth` noise octaves at doubling frequency and halving weight."""
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * perlin_noise_kernel(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)

class Perlin:
    """
    Perlin gradient noise field. The gradient and permutation tables are drawn
    from the given random stream once, so a single instance is a pure function
    of the sample point afterwards.
    """
    def __init__(self, rng):
        ranvec = np.empty((POINT_COUNT, 3), dtype=np.float64)
        for n in range(POINT_COUNT):
            g = Vector3.random(rng, -1.0, 1.0)
            while g.near_zero(1e-6):
                g = Vector3.random(rng, -1.0, 1.0)
            g = g.normalize()
            ranvec[n] = (g.x, g.y, g.z)
        self.ranvec = ranvec
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)

    @staticmethod
    def _generate_perm(rng) -> np.ndarray:
        p = list(range(POINT_COUNT))
        # Fisher-Yates shuffle
        for i in range(POINT_COUNT - 1, 0, -1):
            target = rng.randint(0, i)
            p[i], p[target] = p[target], p[i]
        return np.array(p, dtype=np.int64)

    def noise(self, p: Vector3) -> float:
        return float(perlin_noise_kernel(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                         float(p.x), float(p.y), float(p.z)))

    def turb(self, p: Vector3, depth: int = 7) -> float:
        return float(turbulence_kernel(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                       float(p.x), float(p.y), float(p.z), depth))
