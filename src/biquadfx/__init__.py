# src/biquadfx/__init__.py

# Import and re-export the public classes from their respective modules.
from .filters.BiQuad import BiQuad, FilterType
from .filters.base_filter import AudioFilter
from .sample_rate import (
    DEFAULT_SAMPLE_RATE,
    SampleRate,
    SampleRateListener,
    default_sample_rate,
)
from .utils.messages import RecordingSink, Severity, WarningSink

__all__ = [
    "AudioFilter",
    "BiQuad",
    "DEFAULT_SAMPLE_RATE",
    "FilterType",
    "RecordingSink",
    "SampleRate",
    "SampleRateListener",
    "Severity",
    "WarningSink",
    "default_sample_rate",
]
