# materials/textures.py
import math
from typing import Union
import numpy as np
from PIL import Image, UnidentifiedImageError
from pathtracer.core.vector import Vector3, Color, Point3
from pathtracer.core.utils import clamp
from pathtracer.errors import TextureLoadError
from pathtracer.materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Sample the texture at surface coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "SolidColor":
        return cls(Color(r, g, b))

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color

def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through unchanged."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo

class CheckerTexture(Texture):
    """
    A 3D checker pattern driven by the sign of sin(10x)·sin(10y)·sin(10z).
    Cells are solid regions of space, not squares in UV.
    """
    def __init__(self, odd: Union[Color, Texture], even: Union[Color, Texture]):
        self.odd = as_texture(odd)
        self.even = as_texture(even)

    def value(self, u: float, v: float, p: Point3) -> Color:
        sines = math.sin(10 * p.x) * math.sin(10 * p.y) * math.sin(10 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """A marble-like procedural texture built from Perlin turbulence."""
    def __init__(self, scale: float, rng, depth: int = 7):
        self.noise = Perlin(rng)
        self.scale = scale
        self.depth = depth

    def value(self, u: float, v: float, p: Point3) -> Color:
        turbulence = self.noise.turb(p * self.scale, self.depth)
        # Phase-shift a sine wave along z by the turbulence to get veins.
        value = 0.5 * (1 + math.sin(self.scale * p.z + 10 * turbulence))
        return Color(value, value, value)

class ImageTexture(Texture):
    """
    A texture from an image file, sampled at the nearest pixel.
    The file is decoded once at construction; a missing file is fatal.
    """
    def __init__(self, image_path: str):
        try:
            with Image.open(image_path) as img:
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                # Normalize to [0,1]; rows are top-to-bottom
                self.data = np.asarray(img, dtype=np.float64) / 255.0
        except FileNotFoundError:
            raise
        except (UnidentifiedImageError, OSError) as e:
            raise TextureLoadError(f"Error loading texture {image_path}: {e}") from e
        self.height, self.width = self.data.shape[:2]

    def value(self, u: float, v: float, p: Point3) -> Color:
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Flip V to image row order

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Color(float(color[0]), float(color[1]), float(color[2]))
