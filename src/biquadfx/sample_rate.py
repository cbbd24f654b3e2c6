# src/biquadfx/sample_rate.py
import weakref
from abc import ABC, abstractmethod

DEFAULT_SAMPLE_RATE = 44100.0


class SampleRateListener(ABC):
    """
    Anything that wants to hear about sample rate changes.
    """
    _ignore_sample_rate_change = False

    @abstractmethod
    def sample_rate_changed(self, new_rate, old_rate):
        pass

    def ignore_sample_rate_change(self, ignore=True):
        self._ignore_sample_rate_change = ignore


class SampleRate:
    """
    Holds the current sampling rate (Hz) and broadcasts changes to the
    registered listeners. Listeners are referenced weakly.
    """
    def __init__(self, rate=DEFAULT_SAMPLE_RATE):
        if rate <= 0:
            raise ValueError("Sample rate must be positive.")
        self._rate = float(rate)
        self._listeners = weakref.WeakSet()

    def current_sample_rate(self):
        return self._rate

    def nyquist(self):
        return 0.5 * self._rate

    def set_sample_rate(self, rate):
        if rate <= 0:
            raise ValueError("Sample rate must be positive.")
        rate = float(rate)
        if rate == self._rate:
            return
        old_rate = self._rate
        self._rate = rate
        # Copy first, a listener may deregister while being notified.
        for listener in list(self._listeners):
            listener.sample_rate_changed(rate, old_rate)

    def add_listener(self, listener):
        self._listeners.add(listener)

    def remove_listener(self, listener):
        self._listeners.discard(listener)

    def has_listener(self, listener):
        return listener in self._listeners

    def __len__(self):
        return len(self._listeners)


# Shared provider for filters built without an explicit one.
default_sample_rate = SampleRate()
