# region Imports
import numpy as np

from octave_noise.config import MAX_SAMPLE
from octave_noise.models import NoiseGrid, check_dims
# endregion

# Process-wide source, seeded from OS entropy on import.
_DEFAULT_RNG = np.random.default_rng()


# region Random Sources
def make_rng(seed=None) -> np.random.Generator:
    """numpy Generator for an optional integer seed (None => fresh entropy)."""
    return np.random.default_rng(seed)
# endregion


# region Grid Construction
def create_grid(width: int, height: int, rng=None) -> NoiseGrid:
    """
    Uniform random grid, one independent draw from [0, 255] per cell in
    row-major order.

    rng: anything with numpy's Generator.integers(low, high, size, dtype)
         signature; defaults to the process-wide generator.
    """
    check_dims(width, height)
    rng = _DEFAULT_RNG if rng is None else rng
    samples = rng.integers(0, MAX_SAMPLE + 1, size=(height, width), dtype=np.int64)
    return NoiseGrid(width, height, np.asarray(samples).astype(np.uint8))
# endregion
