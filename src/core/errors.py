# core/errors.py


class RaytracerError(Exception):
    """
    Base class for every error raised by the ray tracer.
    """


class TupleKindError(RaytracerError, TypeError):
    """
    A point was passed where a vector is required, or the other way around.
    """


class NonInvertibleTransformError(RaytracerError, ValueError):
    """
    A shape, pattern or camera was given a singular transform.
    """


class MaterialError(RaytracerError, ValueError):
    """
    A material coefficient is outside of its valid range.
    """


class SceneError(RaytracerError, ValueError):
    """
    The scene (or the canvas it is rendered into) is not usable as given.
    """
