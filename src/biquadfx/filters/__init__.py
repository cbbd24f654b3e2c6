from .base_filter import AudioFilter
from .BiQuad import BiQuad, FilterType

__all__ = ["AudioFilter", "BiQuad", "FilterType"]
