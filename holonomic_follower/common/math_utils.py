import math

import numpy as np

TAU = 2.0 * math.pi


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into (-pi, pi]."""

    wrapped = math.remainder(float(angle), TAU)
    if wrapped <= -math.pi:
        wrapped += TAU
    return wrapped


def rotation_matrix(angle: float) -> np.ndarray:
    c = math.cos(angle)
    s = math.sin(angle)
    return np.array([[c, -s], [s, c]], dtype=float)


def rotate_vector(vec: np.ndarray, angle: float) -> np.ndarray:
    return rotation_matrix(angle) @ np.asarray(vec, dtype=float).reshape(2)


def epsilon_equals(a: float, b: float, eps: float = 1e-6) -> bool:
    return abs(a - b) < eps
