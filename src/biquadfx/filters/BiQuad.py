# src/biquadfx/filters/BiQuad.py
"""
Two-pole, two-zero filter with coefficient design helpers.

Methods are provided for creating a resonance or notch in the frequency
response, for the five standard bilinear-transform responses and for
setting the coefficients directly. Coefficients are never recomputed
automatically; after a sample rate change the filter only warns.
"""
import math
from enum import Enum

import numpy as np

from ..sample_rate import SampleRateListener
from .base_filter import AudioFilter


class FilterType(Enum):
    LOW_PASS = "lowpass"
    HIGH_PASS = "highpass"
    BAND_PASS = "bandpass"
    BAND_REJECT = "bandreject"
    ALL_PASS = "allpass"


class BiQuad(AudioFilter, SampleRateListener):
    """
    Coefficient engine for a single biquad section.

    strict: when True, parameters are range checked and an out-of-range call
        emits a warning and leaves the coefficients untouched. When False the
        checks are skipped and the arguments go straight into the formulas.
    """
    def __init__(self, sample_rate=None, warning_sink=None, strict=True):
        super().__init__(sample_rate, warning_sink)
        self.strict = strict
        self.sample_rate.add_listener(self)

    def close(self):
        self.sample_rate.remove_listener(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    @property
    def coefficients(self):
        return (float(self.b[0]), float(self.b[1]), float(self.b[2]),
                float(self.a[1]), float(self.a[2]))

    def set_coefficients(self, b0, b1, b2, a1, a2, clear_state=False):
        self.b[0] = b0
        self.b[1] = b1
        self.b[2] = b2
        self.a[1] = a1
        self.a[2] = a2

        if clear_state:
            self.clear()

    def set_b0(self, b0):
        self.b[0] = b0

    def set_b1(self, b1):
        self.b[1] = b1

    def set_b2(self, b2):
        self.b[2] = b2

    def set_a1(self, a1):
        self.a[1] = a1

    def set_a2(self, a2):
        self.a[2] = a2

    def sample_rate_changed(self, new_rate, old_rate):
        if not self._ignore_sample_rate_change:
            self._warn(f"BiQuad.sample_rate_changed: rate changed from {old_rate} to "
                       f"{new_rate} Hz, you may need to recompute filter coefficients!")

    def _frequency_in_range(self, method, frequency):
        if frequency < 0.0 or frequency > 0.5 * self.sample_rate.current_sample_rate():
            self._warn(f"BiQuad.{method}: frequency argument ({frequency}) is out of range!")
            return False
        return True

    def set_resonance(self, frequency, radius, normalize=False):
        """
        Places a pole pair at ``radius`` and the angle of ``frequency`` (Hz).

        With ``normalize`` the zeros go to +/-1 and b0 is scaled for a peak
        gain of about one; otherwise b0, b1, b2 keep their current values.
        """
        if self.strict:
            if not self._frequency_in_range("set_resonance", frequency):
                return
            if radius < 0.0 or radius >= 1.0:
                self._warn(f"BiQuad.set_resonance: radius argument ({radius}) is out of range!")
                return

        rate = self.sample_rate.current_sample_rate()
        self.a[2] = radius * radius
        self.a[1] = -2.0 * radius * math.cos(2 * math.pi * frequency / rate)

        if normalize:
            self.b[0] = 0.5 - 0.5 * self.a[2]
            self.b[1] = 0.0
            self.b[2] = -self.b[0]

    def set_notch(self, frequency, radius):
        """
        Places a zero pair at ``radius`` and the angle of ``frequency`` (Hz).
        The filter gain is not normalized.
        """
        if self.strict:
            if not self._frequency_in_range("set_notch", frequency):
                return
            # Zeros may sit outside the unit circle, only a negative radius is rejected.
            if radius < 0.0:
                self._warn(f"BiQuad.set_notch: radius argument ({radius}) is negative!")
                return

        rate = self.sample_rate.current_sample_rate()
        self.b[2] = radius * radius
        self.b[1] = -2.0 * radius * math.cos(2 * math.pi * frequency / rate)

    def set_filter_type(self, filter_type, frequency, Q):
        """
        Bilinear-transform design of a standard response.

        Q = 0 together with frequency = 0 divides by zero; the resulting
        inf/NaN values are stored as they are.
        """
        if self.strict:
            if frequency < 0.0:
                self._warn(f"BiQuad.set_filter_type: frequency argument ({frequency}) is negative!")
                return
            if Q < 0.0:
                self._warn(f"BiQuad.set_filter_type: Q argument ({Q}) is negative!")
                return

        if not isinstance(filter_type, FilterType):
            self._warn(f"BiQuad.set_filter_type: filter type ({filter_type!r}) is invalid!")
            return

        rate = self.sample_rate.current_sample_rate()
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            K = np.tan(np.pi * np.float64(frequency) / rate)
            k_sqr = K * K
            Q = np.float64(Q)
            denom = np.float64(1.0) / (k_sqr * Q + K + Q)

            a1 = 2 * Q * (k_sqr - 1) * denom
            a2 = (k_sqr * Q - K + Q) * denom

            if filter_type is FilterType.LOW_PASS:
                b0 = k_sqr * Q * denom
                b1 = 2 * b0
                b2 = b0
            elif filter_type is FilterType.HIGH_PASS:
                b0 = Q * denom
                b1 = -2 * b0
                b2 = b0
            elif filter_type is FilterType.BAND_PASS:
                b0 = K * denom
                b1 = 0.0
                b2 = -b0
            elif filter_type is FilterType.BAND_REJECT:
                b0 = Q * (k_sqr + 1) * denom
                b1 = 2 * Q * (k_sqr - 1) * denom
                b2 = b0
            else:
                b0 = a2
                b1 = a1
                b2 = 1.0

        self.b[:] = (b0, b1, b2)
        self.a[1] = a1
        self.a[2] = a2

    def set_equal_gain_zeroes(self):
        self.b[0] = 1.0
        self.b[1] = 0.0
        self.b[2] = -1.0


# Example of how to use this class (for testing purposes)
if __name__ == "__main__":
    import sys
    import soundfile as sf

    from ..sample_rate import SampleRate
    from ..utils.audio_utils import get_rms

    if len(sys.argv) < 3:
        print("Usage: python -m biquadfx.filters.BiQuad <input.wav> <output.wav> [freq] [radius]")
        sys.exit(1)

    input_audio_file, output_audio_file = sys.argv[1], sys.argv[2]
    center_freq = float(sys.argv[3]) if len(sys.argv) > 3 else 1000.0
    radius = float(sys.argv[4]) if len(sys.argv) > 4 else 0.99

    print(f"Input file path: {input_audio_file}")
    print(f"Output file path: {output_audio_file}")

    try:
        data, samplerate = sf.read(input_audio_file, dtype='float32')
        if data.ndim > 1:
            data = data.mean(axis=1) # Convert to mono
        print(f"Successfully loaded audio from {input_audio_file} with sample rate {samplerate}")

        with BiQuad(sample_rate=SampleRate(samplerate)) as resonator:
            resonator.set_resonance(center_freq, radius, normalize=True)
            processed_audio = resonator.process(data)
        sf.write(output_audio_file, processed_audio, samplerate)
        print(f"RMS in: {get_rms(data):.4f}, RMS out: {get_rms(processed_audio):.4f}")
        print(f"Resonance at {center_freq} Hz (radius {radius}) saved to {output_audio_file}")
    except FileNotFoundError:
        print(f"Error: File not found at {input_audio_file}. Please check the path and file existence.")
    except RuntimeError as e:
        print(f"An error occurred: {e}")
