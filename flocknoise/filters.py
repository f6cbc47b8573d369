"""Biquad filters and a bank of independently tuned biquads."""

from __future__ import annotations

import math

DEFAULT_SAMPLE_RATE = 44100.0
DEFAULT_Q = 1.0 / math.sqrt(2.0)


class BiquadFilter:
    """A second-order recursive filter with low-shelf and band-pass designs.

    The recursion feeds back the filter's own previous outputs only.
    """

    def __init__(self, sample_rate: float = DEFAULT_SAMPLE_RATE) -> None:
        self.sample_rate = float(sample_rate)
        self.b0 = self.b1 = self.b2 = 0.0
        self.a1 = self.a2 = 0.0
        self.z1 = self.z2 = 0.0

    def prepare_to_play(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)

    def make_low_shelf(self, cutoff: float, gain_db: float, q: float = DEFAULT_Q) -> None:
        """Design a low shelf and clear the filter state."""
        a = 10.0 ** (gain_db / 40.0)
        omega0 = 2.0 * math.pi * cutoff / self.sample_rate
        alpha = math.sin(omega0) / (2.0 * q)
        cos_omega0 = math.cos(omega0)
        sqrt_a = math.sqrt(a)

        b0 = a * ((a + 1) - (a - 1) * cos_omega0 + 2 * sqrt_a * alpha)
        b1 = 2 * a * ((a - 1) - (a + 1) * cos_omega0)
        b2 = a * ((a + 1) - (a - 1) * cos_omega0 - 2 * sqrt_a * alpha)
        a0 = (a + 1) + (a - 1) * cos_omega0 + 2 * sqrt_a * alpha
        a1 = -2 * ((a - 1) + (a + 1) * cos_omega0)
        a2 = (a + 1) + (a - 1) * cos_omega0 - 2 * sqrt_a * alpha

        self.b0 = b0 / a0
        self.b1 = b1 / a0
        self.b2 = b2 / a0
        self.a1 = a1 / a0
        self.a2 = a2 / a0
        self.z1 = self.z2 = 0.0

    def make_band_pass(self, cutoff: float, gain_db: float, q: float) -> None:
        """Design a band pass; the gain is accepted but unused, and state is kept."""
        w0 = 2.0 * math.pi * cutoff / self.sample_rate
        alpha = math.sin(w0) / (2.0 * q)
        a0 = 1.0 + alpha
        self.b0 = alpha / a0
        self.b1 = 0.0
        self.b2 = -alpha / a0
        self.a1 = (-2.0 * math.cos(w0)) / a0
        self.a2 = (1.0 - alpha) / a0

    def filter_sample(self, sample: float) -> float:
        output = (
            self.b0 * sample
            + self.b1 * self.z1
            + self.b2 * self.z2
            - self.a1 * self.z1
            - self.a2 * self.z2
        )
        self.z2 = self.z1
        self.z1 = output
        return output


class MultiBiquad:
    """A fixed-size bank of biquad filters addressed by index."""

    def __init__(self, count: int = 25, sample_rate: float = DEFAULT_SAMPLE_RATE) -> None:
        self.sample_rate = float(sample_rate)
        self.biquads = [BiquadFilter(self.sample_rate) for _ in range(count)]

    def __len__(self) -> int:
        return len(self.biquads)

    def _filter(self, index: int) -> BiquadFilter:
        if not 0 <= index < len(self.biquads):
            raise IndexError(f"filter index {index} out of range")
        return self.biquads[index]

    def prepare_to_play(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        for biquad in self.biquads:
            biquad.prepare_to_play(self.sample_rate)

    def make_bandpass(self, cutoff: float, gain_db: float, q: float, index: int) -> None:
        self._filter(index).make_band_pass(cutoff, gain_db, q)

    def filter_sample(self, sample: float, index: int) -> float:
        return self._filter(index).filter_sample(sample)