from octave_noise.composite import composite
from octave_noise.errors import EmptyInput, InvalidConfiguration, InvalidDimension, NoiseError
from octave_noise.grid import create_grid, make_rng
from octave_noise.models import NoiseGrid
from octave_noise.pipeline import build_octaves, generate, octave_sizes
from octave_noise.resample import resample

__all__ = [
    "NoiseGrid",
    "create_grid",
    "make_rng",
    "resample",
    "composite",
    "build_octaves",
    "generate",
    "octave_sizes",
    "NoiseError",
    "InvalidDimension",
    "InvalidConfiguration",
    "EmptyInput",
]
