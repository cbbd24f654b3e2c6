"""Tests for the sample rate provider and its listeners."""

import gc

import pytest

from biquadfx import DEFAULT_SAMPLE_RATE, BiQuad, RecordingSink, SampleRate, SampleRateListener
from biquadfx.sample_rate import default_sample_rate


class Recorder(SampleRateListener):
    def __init__(self):
        self.calls = []

    def sample_rate_changed(self, new_rate, old_rate):
        self.calls.append((new_rate, old_rate))


def test_default_rate():
    assert SampleRate().current_sample_rate() == DEFAULT_SAMPLE_RATE
    assert SampleRate(48000).nyquist() == 24000.0


@pytest.mark.parametrize("rate", [0, -44100])
def test_rejects_non_positive_rate(rate):
    with pytest.raises(ValueError):
        SampleRate(rate)
    provider = SampleRate()
    with pytest.raises(ValueError):
        provider.set_sample_rate(rate)
    assert provider.current_sample_rate() == DEFAULT_SAMPLE_RATE


def test_broadcasts_new_and_old_rate():
    provider = SampleRate(44100)
    listener = Recorder()
    provider.add_listener(listener)
    provider.set_sample_rate(48000)
    assert listener.calls == [(48000.0, 44100.0)]
    assert provider.current_sample_rate() == 48000.0


def test_same_rate_is_not_broadcast():
    provider = SampleRate(44100)
    listener = Recorder()
    provider.add_listener(listener)
    provider.set_sample_rate(44100)
    assert listener.calls == []


def test_remove_listener():
    provider = SampleRate()
    listener = Recorder()
    provider.add_listener(listener)
    provider.remove_listener(listener)
    provider.remove_listener(listener)
    provider.set_sample_rate(22050)
    assert listener.calls == []


def test_discarded_filter_is_dropped():
    provider = SampleRate()
    sink = RecordingSink()
    filt = BiQuad(sample_rate=provider, warning_sink=sink)
    assert len(provider) == 1
    del filt
    gc.collect()
    assert len(provider) == 0
    provider.set_sample_rate(48000)
    assert len(sink) == 0


def test_filter_without_provider_uses_shared_default():
    with BiQuad(warning_sink=RecordingSink()) as filt:
        assert filt.sample_rate is default_sample_rate
        assert default_sample_rate.has_listener(filt)
