# src/biquadfx/filters/base_filter.py
import math
from abc import ABC, abstractmethod

import numpy as np
from scipy.signal import lfilter, lfiltic

from ..sample_rate import default_sample_rate
from ..utils.audio_utils import frequency_response
from ..utils.messages import Severity, WarningSink


class AudioFilter(ABC):
    """
    Generic second-order recursive filter loop.

    Owns the delay lines (two past inputs, two past outputs) and applies
        y[n] = b0*x[n] + b1*x[n-1] + b2*x[n-2] - a1*y[n-1] - a2*y[n-2]
    with the input scaled by ``gain``. Subclasses decide how ``b`` and ``a``
    are computed.
    """
    @abstractmethod
    def __init__(self, sample_rate=None, warning_sink=None):
        # 抽象類別，確保子類別有這些共同屬性
        self.sample_rate = sample_rate if sample_rate is not None else default_sample_rate
        self.warning_sink = warning_sink if warning_sink is not None else WarningSink()
        self.gain = 1.0

        # 濾波器的係數 (a[0] 永遠是 1)
        self.b = np.array([1.0, 0.0, 0.0])
        self.a = np.array([1.0, 0.0, 0.0])

        # 延遲緩衝區, index 0 是最近的樣本
        self.x_delay = np.zeros(2)
        self.y_delay = np.zeros(2)
        self._last_out = 0.0

    def _warn(self, message, severity=Severity.WARNING):
        self.warning_sink.emit_warning(message, severity)

    def set_gain(self, gain):
        self.gain = gain

    def get_gain(self):
        return self.gain

    def clear(self):
        """Zero the delay lines."""
        self.x_delay = np.zeros(2)
        self.y_delay = np.zeros(2)
        self._last_out = 0.0

    def reset_state(self):
        self.clear()

    def last_out(self):
        return self._last_out

    def tick(self, sample):
        x_in = self.gain * sample
        output = (self.b[0] * x_in +
                  self.b[1] * self.x_delay[0] +
                  self.b[2] * self.x_delay[1] -
                  self.a[1] * self.y_delay[0] -
                  self.a[2] * self.y_delay[1])

        # 更新延遲緩衝區
        self.x_delay[1] = self.x_delay[0]
        self.x_delay[0] = x_in
        self.y_delay[1] = self.y_delay[0]
        self.y_delay[0] = output

        self._last_out = float(output)
        return self._last_out

    def process(self, audio_data: np.ndarray) -> np.ndarray:
        """
        Filters a 1D block and carries the delay lines over to the next call,
        so blocks and single ticks can be mixed freely.
        """
        x = self.gain * np.asarray(audio_data, dtype=np.float64)
        if x.size == 0:
            return np.zeros(0)

        zi = lfiltic(self.b, self.a, y=self.y_delay, x=self.x_delay)
        filtered_data, _ = lfilter(self.b, self.a, x, zi=zi)

        x_hist = np.concatenate((self.x_delay[::-1], x))
        y_hist = np.concatenate((self.y_delay[::-1], filtered_data))
        self.x_delay = np.array([x_hist[-1], x_hist[-2]])
        self.y_delay = np.array([y_hist[-1], y_hist[-2]])
        self._last_out = float(filtered_data[-1])
        return filtered_data

    def frequency_response(self, frequencies):
        """Complex response (gain included) at the given frequencies in Hz."""
        return frequency_response(self.gain * self.b, self.a, frequencies,
                                  self.sample_rate.current_sample_rate())

    def phase_delay(self, frequency):
        """
        Phase delay, in samples, at the given frequency (Hz).
        """
        rate = self.sample_rate.current_sample_rate()
        if frequency <= 0.0 or frequency > 0.5 * rate:
            self._warn(f"{type(self).__name__}.phase_delay: argument ({frequency}) is out of range!")
            return 0.0

        omega_t = 2 * math.pi * frequency / rate
        z = np.exp(-1j * omega_t * np.arange(3))
        # Numerator and denominator angles are taken separately, not as angle(H).
        phase = np.angle(self.gain * np.dot(self.b, z)) - np.angle(np.dot(self.a, z))
        return math.fmod(-phase, 2 * math.pi) / omega_t
