# spatial/deprecation.py
import warnings


def deprecated_alias(name: str, replacement: str):
    """
    Builds a method that forwards to ``replacement`` on the same instance,
    emitting a DeprecationWarning on every call.
    """
    def alias(self, *args, **kwargs):
        warnings.warn(
            f"Vector3.{name}() is deprecated, use {replacement}() instead.",
            DeprecationWarning, stacklevel=2,
        )
        return getattr(self, replacement)(*args, **kwargs)

    alias.__name__ = name
    alias.__doc__ = f"Deprecated alias of {replacement}()."
    return alias


class LegacyAliases:
    """
    Mixin carrying the legacy method names. Each one delegates to the current
    spelling with no behavioural difference.
    """
    rescaled = deprecated_alias("rescaled", "get_scaled")
    rescale = deprecated_alias("rescale", "scale")
    rotated = deprecated_alias("rotated", "get_rotated")
    normalized = deprecated_alias("normalized", "get_normalized")
    limited = deprecated_alias("limited", "get_limited")
    crossed = deprecated_alias("crossed", "get_crossed")
    perpendiculared = deprecated_alias("perpendiculared", "get_perpendicular")
    mapped = deprecated_alias("mapped", "get_mapped")
    distance_squared = deprecated_alias("distance_squared", "square_distance")
    interpolated = deprecated_alias("interpolated", "get_interpolated")
    middled = deprecated_alias("middled", "get_middle")
