# export.py
# ---------
# Writes a NoiseGrid to disk.
#
# Exposes:
#   - encode_png(grid)          (bytes, for HTTP responses)
#   - save_png(path, grid)
#   - save_geotiff(path, grid)  (needs rasterio)
#   - writer_for(path)          (writer chosen by extension)
#   - save_image(path, grid)    (dispatch on extension)
#
# Dependencies: Pillow
# Optional: rasterio (GeoTIFF output)

from __future__ import annotations
import io
import logging
import os

from PIL import Image

from octave_noise.models import NoiseGrid

logger = logging.getLogger(__name__)

# RasterIO is imported lazily inside save_geotiff.


# region PNG
def _to_image(grid: NoiseGrid) -> Image.Image:
    return Image.fromarray(grid.samples, "L")


def encode_png(grid: NoiseGrid) -> bytes:
    buf = io.BytesIO()
    _to_image(grid).save(buf, "PNG")
    return buf.getvalue()


def save_png(path: str, grid: NoiseGrid) -> str:
    _to_image(grid).save(path, "PNG")
    logger.info(f"Wrote {grid.width}x{grid.height} PNG to {path}")
    return path
# endregion


# region GeoTIFF
def save_geotiff(path: str, grid: NoiseGrid) -> str:
    """Single-band uint8 GeoTIFF with no CRS (pixel coordinates only)."""
    try:
        import rasterio
    except Exception as e:
        raise RuntimeError(
            "GeoTIFF export requires rasterio. "
            "Install with: pip install rasterio"
        ) from e

    with rasterio.open(
        path,
        "w",
        driver="GTiff",
        height=grid.height,
        width=grid.width,
        count=1,
        dtype="uint8",
    ) as ds:
        ds.write(grid.samples, 1)
    logger.info(f"Wrote {grid.width}x{grid.height} GeoTIFF to {path}")
    return path
# endregion


# region Dispatch
_WRITERS = {
    ".png": save_png,
    ".tif": save_geotiff,
    ".tiff": save_geotiff,
}


def writer_for(path: str):
    """Writer function for `path`, chosen by extension."""
    ext = os.path.splitext(path)[1].lower()
    writer = _WRITERS.get(ext)
    if writer is None:
        raise ValueError(
            f"Unsupported output extension {ext!r}; use one of {sorted(_WRITERS)}."
        )
    return writer


def save_image(path: str, grid: NoiseGrid) -> str:
    return writer_for(path)(path, grid)
# endregion
