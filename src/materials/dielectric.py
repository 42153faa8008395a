# materials/dielectric.py
"""
Snell's law and Schlick's Fresnel approximation, evaluated on a shading
context (which already carries eye, normal and the n1/n2 pair).
"""
import math
from typing import Optional
from core.vector import Vector3


def sin2_transmitted(n_ratio: float, cos_i: float) -> float:
    return n_ratio * n_ratio * (1.0 - cos_i * cos_i)


def refracted_direction(ctx) -> Optional[Vector3]:
    """
    Direction of the transmitted ray, or None on total internal reflection.
    """
    n_ratio = ctx.n1 / ctx.n2
    cos_i = ctx.eye.dot(ctx.normal)
    sin2_t = sin2_transmitted(n_ratio, cos_i)
    if sin2_t > 1.0:
        return None
    cos_t = math.sqrt(1.0 - sin2_t)
    return ctx.normal * (n_ratio * cos_i - cos_t) - ctx.eye * n_ratio


def schlick(ctx) -> float:
    """
    Fraction of light reflected at the surface. Returns exactly 1.0 under
    total internal reflection.
    """
    cos = ctx.eye.dot(ctx.normal)
    if ctx.n1 > ctx.n2:
        sin2_t = sin2_transmitted(ctx.n1 / ctx.n2, cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((ctx.n1 - ctx.n2) / (ctx.n1 + ctx.n2)) ** 2
    return r0 + (1.0 - r0) * math.pow(1.0 - cos, 5)
