# core/matrix.py
"""
4x4 affine transforms stored as numpy float64 arrays.

Builders return fresh arrays; compose them with the @ operator or with
chain(), which applies its arguments in the order they are given.
"""
import math
import numpy as np
from core.errors import NonInvertibleTransformError
from core.vector import Vector3

# Determinants below this are treated as singular.
SINGULAR_EPSILON = 1e-12


def identity() -> np.ndarray:
    return np.identity(4, dtype=np.float64)


def translation(x: float, y: float, z: float) -> np.ndarray:
    m = identity()
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def scaling(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0]).astype(np.float64)


def rotation_x(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[1, 1], m[1, 2] = c, -s
    m[2, 1], m[2, 2] = s, c
    return m


def rotation_y(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return m


def rotation_z(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def shearing(x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float) -> np.ndarray:
    """
    Each coordinate moves in proportion to the other two, e.g. x_y moves x
    in proportion to y.
    """
    m = identity()
    m[0, 1], m[0, 2] = x_y, x_z
    m[1, 0], m[1, 2] = y_x, y_z
    m[2, 0], m[2, 1] = z_x, z_y
    return m


def chain(*transforms: np.ndarray) -> np.ndarray:
    """
    Composes transforms so that the first argument is applied first.
    chain(a, b, c) == c @ b @ a
    """
    result = identity()
    for m in transforms:
        result = m @ result
    return result


def view_transform(from_point: Vector3, to_point: Vector3, up: Vector3) -> np.ndarray:
    """
    Orients the world relative to an eye at from_point looking at to_point.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = np.array([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ], dtype=np.float64)
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


def inverse(m: np.ndarray) -> np.ndarray:
    """
    Inverts an affine transform. Raises NonInvertibleTransformError if m
    is singular.
    """
    if abs(np.linalg.det(m)) < SINGULAR_EPSILON:
        raise NonInvertibleTransformError(f"transform is not invertible:\n{m}")
    inv = np.linalg.inv(m)
    # Keep the affine row exact so points stay points after a round trip.
    inv[3] = (0.0, 0.0, 0.0, 1.0)
    return inv


def frozen(m: np.ndarray) -> np.ndarray:
    """Read-only float64 copy of m."""
    out = np.array(m, dtype=np.float64)
    out.flags.writeable = False
    return out


def transform(m: np.ndarray, v: Vector3) -> Vector3:
    """
    Applies a transform to a point or a vector (vectors ignore translation).
    The result keeps the tag of the input.
    """
    r = m @ v.to_array()
    return Vector3(float(r[0]), float(r[1]), float(r[2]), v.w)
