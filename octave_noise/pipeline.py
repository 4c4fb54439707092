# region Imports
from typing import List, Optional
import logging
import time

from octave_noise.composite import composite
from octave_noise.config import DEFAULT_OCTAVES
from octave_noise.errors import InvalidConfiguration
from octave_noise.grid import create_grid
from octave_noise.models import NoiseGrid
from octave_noise.resample import resample
# endregion

logger = logging.getLogger(__name__)


# region Size Progression
def _check_config(octave_count: int, output_size: int) -> None:
    if octave_count < 1:
        raise InvalidConfiguration(f"octave_count must be >= 1, got {octave_count}")
    if output_size < 1:
        raise InvalidConfiguration(f"output_size must be >= 1, got {output_size}")


def default_output_size(octave_count: int = DEFAULT_OCTAVES) -> int:
    if octave_count < 1:
        raise InvalidConfiguration(f"octave_count must be >= 1, got {octave_count}")
    return 1 << octave_count


def octave_sizes(octave_count: int, output_size: int) -> List[int]:
    """
    Linear size of each octave: output_size, output_size // 2, ...
    Halving keeps flooring, so sizes can reach 0.
    """
    _check_config(octave_count, output_size)
    sizes = [output_size]
    for _ in range(1, octave_count):
        sizes.append(sizes[-1] // 2)
    return sizes
# endregion


# region Octave Construction
def build_octaves(
    octave_count: int = DEFAULT_OCTAVES,
    output_size: Optional[int] = None,
    rng=None,
) -> List[NoiseGrid]:
    """
    Create every octave and bring it to output_size x output_size.
    Octave 0 is generated at full size and never resampled.
    Octaves that halve down to 0 px are black layers; they still count
    toward the composite divisor.
    """
    if output_size is None:
        output_size = default_output_size(octave_count)
    sizes = octave_sizes(octave_count, output_size)

    octaves: List[NoiseGrid] = []
    for i, size in enumerate(sizes):
        if size == 0:
            g = NoiseGrid.constant(output_size, output_size, 0)
        else:
            g = create_grid(size, size, rng=rng)
            if i > 0:
                g = resample(g, output_size, output_size)
        logger.debug("octave %d: %dx%d -> %dx%d", i, size, size, g.width, g.height)
        octaves.append(g)
    return octaves
# endregion


# region Pipeline Entry
def generate(
    octave_count: int = DEFAULT_OCTAVES,
    output_size: Optional[int] = None,
    rng=None,
) -> NoiseGrid:
    """Fractal noise: the rounded mean of `octave_count` upsampled octaves."""
    if output_size is None:
        output_size = default_output_size(octave_count)
    _check_config(octave_count, output_size)

    t0 = time.perf_counter()
    result = composite(build_octaves(octave_count, output_size, rng=rng))
    logger.info(
        f"Generated {output_size}x{output_size} noise from {octave_count} octaves "
        f"in {time.perf_counter() - t0:.3f}s"
    )
    return result
# endregion
