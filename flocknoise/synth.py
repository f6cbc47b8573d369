"""Filtered noise whose band-pass voices follow the movers of a flock."""

from __future__ import annotations

import math
import random

from flocknoise.filters import MultiBiquad
from flocknoise.flock import NUM_BIRDS, Nest
from flocknoise.vector import Vector

MIN_FREQUENCY = 100.0
MAX_FREQUENCY = 10000.0
BASE_GAIN_DB = 5.0
WIND = Vector(0.5, 0.0)
TICK_SECONDS = 0.025


def freq_from_norm(norm: float) -> float:
    """Map a normalised height to a centre frequency between 100 Hz and 10 kHz."""
    return min(MAX_FREQUENCY, max(MIN_FREQUENCY, 10.0 * 2200.0**norm))


class FlockingNoise:
    """White noise through one band-pass filter per mover, mixed and soft-clipped.

    Each mover's height sets its filter's centre frequency and its horizontal
    position sets the filter's Q.
    """

    def __init__(self, nest: Nest | None = None, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        if nest is None:
            nest = Nest(rng=self.rng)
            nest.populate(NUM_BIRDS)
        if not nest.movers:
            raise ValueError("the nest holds no movers")
        self.nest = nest
        self.filters = MultiBiquad(len(nest.movers))
        self.accumulator = 0.0

    def prepare_to_play(self, sample_rate: float) -> None:
        """Set the sample rate of every filter."""
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.filters.prepare_to_play(sample_rate)

    def _voice_parameters(self) -> list[tuple[float, float, float]]:
        movers = self.nest.movers
        if len(movers) != len(self.filters):
            raise ValueError(
                f"nest holds {len(movers)} movers but {len(self.filters)} filters exist"
            )
        return [
            (
                freq_from_norm(self.nest.normalized_y(i)),
                self.nest.normalized_x(i),
                mover.mass,
            )
            for i, mover in enumerate(movers)
        ]

    def next_block(self, num_samples: int, num_channels: int = 2) -> list[list[float]]:
        """Render ``num_samples`` samples for each of ``num_channels`` channels.

        Filter state carries over from channel to channel and block to block.
        """
        if num_samples < 0:
            raise ValueError("number of samples must not be negative")
        if num_channels < 0:
            raise ValueError("number of channels must not be negative")
        params = self._voice_parameters()
        count = len(params)
        channels: list[list[float]] = []
        for _ in range(num_channels):
            samples: list[float] = []
            for index in range(num_samples):
                self.accumulator = 0.0
                noise = (self.rng.random() - 0.5) * 2
                for voice, (cutoff, q, mass) in enumerate(params):
                    gain = BASE_GAIN_DB if index == 0 else mass * BASE_GAIN_DB
                    self.filters.make_bandpass(cutoff, gain, q, voice)
                    self.accumulator += self.filters.filter_sample(noise, voice) / count
                samples.append(math.tanh(self.accumulator / count))
            channels.append(samples)
        return channels

    def release_resources(self) -> None:
        self.accumulator = 0.0