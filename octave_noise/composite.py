# region Imports
from typing import Sequence
import numpy as np

from octave_noise.config import MAX_SAMPLE
from octave_noise.errors import EmptyInput
from octave_noise.models import NoiseGrid
# endregion


# region Octave Blend
def composite(octaves: Sequence[NoiseGrid]) -> NoiseGrid:
    """
    Pixel-wise mean of all octaves on a (max W, max H) canvas.

    Each octave contributes only inside its own extent, but the divisor is
    always len(octaves), so pixels covered by fewer octaves come out darker.
    Halves round away from zero.
    """
    octaves = list(octaves)
    if not octaves:
        raise EmptyInput("composite() needs at least one octave.")

    W = max(g.width for g in octaves)
    H = max(g.height for g in octaves)

    acc = np.zeros((H, W), dtype=np.int64)
    for g in octaves:
        acc[:g.height, :g.width] += g.samples

    n = len(octaves)
    # integer round-half-up on non-negative sums: floor((2*sum + n) / 2n)
    mean = (2 * acc + n) // (2 * n)
    mean = np.clip(mean, 0, MAX_SAMPLE).astype(np.uint8)
    return NoiseGrid(W, H, mean)
# endregion
