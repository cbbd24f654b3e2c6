import numpy as np
import pytest

from biquadfx import BiQuad, RecordingSink, SampleRate


@pytest.fixture
def provider():
    return SampleRate(44100)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def biquad(provider, sink):
    with BiQuad(sample_rate=provider, warning_sink=sink) as filt:
        yield filt


@pytest.fixture
def noise():
    rng = np.random.default_rng(1234)
    return rng.standard_normal(512)
