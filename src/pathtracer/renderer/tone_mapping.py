# renderer/tone_mapping.py
import numpy as np

def gamma_correct(linear, gamma: float = 2.0):
    """
    Gamma-correct a linear radiance image. NaN samples become black and
    negative values are clipped before the power curve.
    """
    clean = np.nan_to_num(np.asarray(linear, dtype=np.float64), nan=0.0)
    return np.clip(clean, 0.0, None) ** (1.0 / gamma)

def to_rgb8(linear, gamma: float = 2.0) -> np.ndarray:
    """
    Convert a linear radiance image to 8-bit RGB: gamma 2 (sqrt), clamp to
    [0, 0.999] and scale by 256.
    """
    mapped = np.clip(gamma_correct(linear, gamma), 0.0, 0.999)
    return (256 * mapped).astype(np.uint8)
