"""Band-pass noise steered by a flocking simulation, with a WAV renderer."""

__version__ = "0.1.0"
__all__ = ["cli", "filters", "flock", "synth", "vector"]