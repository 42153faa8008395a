# core/utils.py
import math
import numpy as np

# Tolerance used for float comparisons and for nudging ray origins off surfaces.
EPSILON = 1e-4


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Returns True if a and b differ by less than epsilon.
    Infinities of the same sign compare equal.
    """
    if a == b:
        return True
    return abs(a - b) < epsilon


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divides like IEEE floats do instead of raising ZeroDivisionError:
    a zero denominator yields an infinity signed by both operands.
    """
    if denominator != 0.0:
        return numerator / denominator
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return sign * math.inf


def row_rng(seed: int, row: int) -> np.random.Generator:
    """
    Returns the random generator for one image row.
    Seeding by (seed, row) keeps renders reproducible whatever the worker count.
    """
    return np.random.default_rng([seed, row])
