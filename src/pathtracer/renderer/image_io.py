# renderer/image_io.py
import logging
from pathlib import Path
from typing import TextIO, Union
import numpy as np
from PIL import Image

from pathtracer.errors import ImageWriteError

logger = logging.getLogger(__name__)

def write_ppm(stream: TextIO, pixels: np.ndarray) -> None:
    """
    Write an (height, width, 3) uint8 image as plain-text PPM (P3),
    one "R G B" line per pixel, top row first.
    """
    height, width = pixels.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        stream.write("".join(f"{int(r)} {int(g)} {int(b)}\n" for r, g, b in row))

def save_image(path: Union[str, Path], pixels: np.ndarray) -> None:
    """
    Save an 8-bit image. '.ppm' files are written as plain-text PPM; any
    other extension is encoded by Pillow. Raises ImageWriteError when Pillow
    has no encoder for the extension; filesystem errors propagate as OSError.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with open(path, "w", encoding="ascii") as f:
            write_ppm(f, pixels)
    else:
        image = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        try:
            image.save(path)
        except ValueError as e:
            raise ImageWriteError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %s", path)
