"""Command line entry point that renders the flocking noise to a WAV file."""

from __future__ import annotations

import argparse
import random
import sys
import wave
from array import array

from flocknoise.flock import NUM_BIRDS, Nest
from flocknoise.synth import TICK_SECONDS, WIND, FlockingNoise

DEFAULT_SECONDS = 5.0
DEFAULT_SAMPLE_RATE = 44100
CHANNELS = 2


def _to_pcm(channels: list[list[float]]) -> bytes:
    frames = array(
        "h",
        (
            int(max(-1.0, min(1.0, sample)) * 32767)
            for frame in zip(*channels)
            for sample in frame
        ),
    )
    if sys.byteorder == "big":
        frames.byteswap()
    return frames.tobytes()


def render(
    path: str,
    seconds: float = DEFAULT_SECONDS,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    seed: int | None = None,
) -> int:
    """Render ``seconds`` of stereo audio to ``path``; return the frame count.

    The flock is pushed by the wind and advanced once every 25 ms of audio.
    """
    if seconds < 0:
        raise ValueError("duration must not be negative")
    if sample_rate <= 0:
        raise ValueError("sample rate must be positive")
    rng = random.Random(seed)
    nest = Nest(rng=rng)
    nest.populate(NUM_BIRDS)
    synth = FlockingNoise(nest, rng)
    synth.prepare_to_play(sample_rate)

    total = int(seconds * sample_rate)
    per_tick = max(1, round(sample_rate * TICK_SECONDS))
    written = 0
    with wave.open(str(path), "wb") as out:
        out.setnchannels(CHANNELS)
        out.setsampwidth(2)
        out.setframerate(int(sample_rate))
        while written < total:
            size = min(per_tick, total - written)
            out.writeframes(_to_pcm(synth.next_block(size, CHANNELS)))
            written += size
            nest.step(WIND)
    synth.release_resources()
    return written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flocknoise", description="Render flocking band-pass noise to a WAV file."
    )
    parser.add_argument("output", help="path of the WAV file to write")
    parser.add_argument("--seconds", type=float, default=DEFAULT_SECONDS)
    parser.add_argument("--sample-rate", type=int, default=DEFAULT_SAMPLE_RATE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        render(args.output, args.seconds, args.sample_rate, args.seed)
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())