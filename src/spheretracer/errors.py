# errors.py


class SceneError(ValueError):
    """
    Raised when a scene object is built with parameters that cannot be
    rendered (non-positive sphere radius, non-positive refractive index).
    """


class ConfigError(ValueError):
    """
    Raised for render settings outside their valid range or unknown
    preset, scene and shading names.
    """
