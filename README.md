# flocknoise

A flock of birds drifts across a small two-dimensional field (550 by 200 by
default), pushed along by a steady wind. Each bird drives one band-pass filter
applied to white noise:

- its height sets the filter's centre frequency, mapped to 100 Hz to 10 kHz
  by `flocknoise.synth.freq_from_norm`,
- its horizontal position sets the filter's Q (from 1 at the left edge to 51
  at the right).

The filtered signals are mixed and soft-clipped with `tanh`, which gives a
shifting, breathy texture that follows the flock. Each bird's mass is passed
to its filter as a gain, but the band-pass design does not use the gain, so
it has no audible effect.

## Installation

```
pip install .
```

The package has no runtime dependencies beyond the Python standard library
(Python 3.10 or later).

## Command line

Render the flock to a 16-bit stereo WAV file:

```
flocknoise out.wav
```

Options:

- `--seconds` – duration to render (default 5.0),
- `--sample-rate` – sample rate in Hz (default 44100),
- `--seed` – random seed; a fixed seed always produces the same file.

The flock is advanced one step, pushed by the wind, after every 25 ms of
rendered audio. Run `flocknoise --help` for a summary.

## Library use

```python
import random

from flocknoise.flock import Nest
from flocknoise.synth import FlockingNoise
from flocknoise.vector import Vector

rng = random.Random(1)
nest = Nest(550, 200, rng)
nest.populate(25)

synth = FlockingNoise(nest, rng)
synth.prepare_to_play(44100)

wind = Vector(0.5, 0)
for _ in range(10):
    nest.step(wind)
    block = synth.next_block(512, 2)  # one list of samples per channel
```

`flocknoise.cli.render(path, seconds, sample_rate, seed)` writes a WAV file
from Python code and returns the number of frames written.

Modules:

- `flocknoise.vector` – `Vector`, an immutable 2-D vector with component-wise
  `+`, `-`, `*` and `/` (the last two also take a plain number).
- `flocknoise.flock` – `Mover`, `Nest` (a field of movers that wrap
  horizontally and bounce vertically) and `Bird` (a single mover with fixed
  drag).
- `flocknoise.filters` – `BiquadFilter` with low-shelf and band-pass designs,
  and `MultiBiquad`, a bank of filters addressed by index.
- `flocknoise.synth` – `FlockingNoise`, which renders blocks of audio from a
  `Nest`.
- `flocknoise.cli` – the `flocknoise` command.

## What it does not do

There is no live audio output and no on-screen view of the flock: the package
renders audio to lists of samples or to a WAV file only.

## Tests

```
pip install .[test]
pytest
```