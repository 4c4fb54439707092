# region Header
"""
cli.py — generate an octave-noise image and write it to disk.

Defaults: 12 octaves, 4096x4096 output, written to ./out.png

Requires:
  pip install numpy pillow
Optional:
  pip install matplotlib        (--preview)
  pip install pyvista           (--view-3d)
  pip install rasterio          (.tif output)
"""
# endregion

# region Imports
import argparse
import logging

from octave_noise.composite import composite
from octave_noise.config import DEFAULT_OCTAVES, DEFAULT_OUTPUT
from octave_noise.errors import NoiseError
from octave_noise.export import writer_for
from octave_noise.grid import make_rng
from octave_noise.pipeline import build_octaves, default_output_size, generate
# endregion


# region Arguments
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="octave-noise",
        description="Average halving-resolution random octaves into a grayscale fractal-noise image.",
    )
    ap.add_argument("--octaves", type=int, default=DEFAULT_OCTAVES,
                    help=f"number of octaves (default {DEFAULT_OCTAVES})")
    ap.add_argument("--size", type=int, default=None,
                    help="output width/height in pixels (default 2**octaves)")
    ap.add_argument("--seed", type=int, default=None,
                    help="random seed for reproducible output")
    ap.add_argument("--output", default=DEFAULT_OUTPUT,
                    help=f"output path, .png or .tif (default {DEFAULT_OUTPUT})")
    ap.add_argument("--preview", action="store_true",
                    help="show every octave and the result with matplotlib")
    ap.add_argument("--view-3d", action="store_true",
                    help="show the result as a 3D heightmap (pyvista)")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap
# endregion


# region Main
def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.size is None and args.octaves >= 1:
        args.size = default_output_size(args.octaves)
    try:
        write = writer_for(args.output)
        rng = make_rng(args.seed)
        if args.preview:
            octaves = build_octaves(args.octaves, args.size, rng=rng)
            result = composite(octaves)
        else:
            octaves = None
            result = generate(args.octaves, args.size, rng=rng)
    except (NoiseError, ValueError) as e:
        ap.error(str(e))

    write(args.output, result)

    if args.preview:
        from octave_noise.viz import show_octaves
        show_octaves(octaves, result, title=f"{args.octaves} octaves, {args.size}px")
    if args.view_3d:
        from octave_noise.terrain_3d import plot_heightmap_3d
        plot_heightmap_3d(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
# endregion
