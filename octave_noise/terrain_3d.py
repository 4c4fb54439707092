# region Imports
import numpy as np

from octave_noise.models import NoiseGrid
# endregion


# region Heightmap Mesh
def heightmap_mesh(grid: NoiseGrid, z_scale: float = 0.25):
    """
    StructuredGrid of the noise read as a heightmap (z = sample * z_scale).
    Requires pyvista installed.
    """
    try:
        import pyvista as pv
    except Exception as e:
        raise RuntimeError(
            "3D view requires pyvista. Install with: pip install pyvista"
        ) from e

    xs = np.arange(grid.width, dtype=np.float32)
    ys = np.arange(grid.height, dtype=np.float32)
    xx, yy = np.meshgrid(xs, ys)
    zz = grid.samples.astype(np.float32) * float(z_scale)
    surf = pv.StructuredGrid(xx, yy, zz)
    surf["intensity"] = grid.samples.ravel(order="F")
    return surf
# endregion


# region Heightmap Plot
def plot_heightmap_3d(grid: NoiseGrid, z_scale: float = 0.25, title="Octave noise 3D"):
    import pyvista as pv

    surf = heightmap_mesh(grid, z_scale=z_scale)
    p = pv.Plotter()
    p.add_mesh(surf, scalars="intensity", cmap="terrain", show_edges=False)
    p.add_scalar_bar(title="intensity")
    p.add_axes()
    p.set_background("black")
    p.add_text(title, color="white")
    p.show()
# endregion
