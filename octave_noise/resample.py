# resample.py
# -----------
# Bilinear resize of a NoiseGrid to arbitrary dimensions.
#
# Half-pixel-center sampling with clamp-to-edge borders; results are
# truncated (not rounded) to uint8.

import numpy as np

from octave_noise.errors import InvalidDimension
from octave_noise.models import NoiseGrid


# region Axis Mapping
def _axis_coords(src_len: int, dst_len: int):
    """
    For each destination index along one axis, return the two source indices
    to blend and the fractional weight of the second.
    """
    scale = src_len / dst_len
    s = (np.arange(dst_len, dtype=np.float64) + 0.5) * scale - 0.5
    s = np.maximum(s, 0.0)

    i0 = np.floor(s).astype(np.intp)
    i0 = np.minimum(i0, src_len - 1)
    frac = s - i0
    i1 = np.minimum(i0 + 1, src_len - 1)
    return i0, i1, frac
# endregion


# region Resample
def resample(source: NoiseGrid, dest_width: int, dest_height: int) -> NoiseGrid:
    """
    Map `source` onto a dest_width x dest_height grid.

    Returns a new grid; `source` is left untouched.
    """
    if dest_width <= 0 or dest_height <= 0:
        raise InvalidDimension(
            f"Resample target must be positive (W={dest_width}, H={dest_height})."
        )

    x0, x1, fx = _axis_coords(source.width, dest_width)
    y0, y1, fy = _axis_coords(source.height, dest_height)

    src = source.samples.astype(np.float64)
    rows0 = src[y0]
    rows1 = src[y1]
    c1, c2 = rows0[:, x0], rows0[:, x1]
    c3, c4 = rows1[:, x0], rows1[:, x1]

    fx = fx[np.newaxis, :]
    fy = fy[:, np.newaxis]

    ifx = 1.0 - fx
    ify = 1.0 - fy

    l0 = ifx * c1 + fx * c2
    l1 = ifx * c3 + fx * c4
    rf = ify * l0 + fy * l1

    # keep roundoff inside the corner range so flat regions stay flat
    lo = np.minimum(np.minimum(c1, c2), np.minimum(c3, c4))
    hi = np.maximum(np.maximum(c1, c2), np.maximum(c3, c4))
    rf = np.clip(rf, lo, hi)

    out = np.trunc(rf).astype(np.uint8)
    return NoiseGrid(dest_width, dest_height, out)
# endregion
