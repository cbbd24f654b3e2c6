import numpy as np
from scipy.signal import freqz


def get_rms(data):
    """
    計算音訊數據的 RMS (Root Mean Square) 值，代表音量大小。
    """
    data = np.asarray(data)
    if data.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(data))))


def frequency_response(b, a, frequencies, samplerate):
    """
    Complex response H(e^jw) of the filter (b, a) at the given frequencies in Hz.
    """
    # A bare integer worN means "number of points" to freqz, so always pass an array.
    worN = np.atleast_1d(np.asarray(frequencies, dtype=np.float64))
    _, h = freqz(b, a, worN=worN, fs=samplerate)
    return h


def magnitude_response(b, a, frequencies, samplerate):
    return np.abs(frequency_response(b, a, frequencies, samplerate))


def bw_to_q(bw, fc):
    """
    Q of a band-pass or band-reject response with bandwidth ``bw`` (Hz)
    centred on ``fc`` (Hz), for use with BiQuad.set_filter_type.
    """
    return fc / bw
