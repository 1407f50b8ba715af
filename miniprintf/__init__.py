"""A small printf-style formatter: conversions and the render/printf functions."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]