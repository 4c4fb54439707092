# region Imports
from typing import Optional, Sequence
import numpy as np

from octave_noise.models import NoiseGrid
# endregion

# matplotlib is imported lazily inside the functions that draw.


def _pyplot():
    try:
        import matplotlib.pyplot as plt
    except Exception as e:
        raise RuntimeError(
            "Previews require matplotlib. Install with: pip install matplotlib"
        ) from e
    return plt


# region Octave Preview
def octave_figure(
    octaves: Sequence[NoiseGrid],
    result: Optional[NoiseGrid] = None,
    title: str = "Octave noise",
):
    """
    One panel per octave, plus the composite if given.
    Returns the matplotlib Figure without showing it.
    """
    plt = _pyplot()
    panels = list(octaves) + ([result] if result is not None else [])
    n = len(panels)
    cols = min(4, n)
    rows = int(np.ceil(n / cols))

    fig, axes = plt.subplots(rows, cols, figsize=(3 * cols, 3 * rows), squeeze=False)
    for ax in axes.ravel():
        ax.set_axis_off()

    for i, g in enumerate(panels):
        ax = axes.ravel()[i]
        ax.imshow(g.samples, cmap="gray", vmin=0, vmax=255, origin="upper")
        is_result = result is not None and i == n - 1
        ax.set_title("Composite" if is_result else f"Octave {i}", fontsize=9)

    fig.suptitle(title)
    fig.tight_layout()
    return fig


def show_octaves(octaves, result=None, title="Octave noise"):
    octave_figure(octaves, result, title=title)
    _pyplot().show()
# endregion
