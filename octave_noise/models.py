# models.py
from dataclasses import dataclass
import numpy as np

from octave_noise.config import MAX_SAMPLE
from octave_noise.errors import InvalidDimension


def check_dims(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise InvalidDimension(
            f"Grid dimensions must be positive (W={width}, H={height})."
        )


@dataclass
class NoiseGrid:
    """
    width:   number of columns (>= 1)
    height:  number of rows (>= 1)
    samples: uint8 intensities, shape (height, width), row-major
    """
    width: int
    height: int
    samples: np.ndarray   # (H,W) uint8

    def __post_init__(self):
        check_dims(self.width, self.height)
        if self.samples.shape != (self.height, self.width):
            raise ValueError(
                f"samples shape {self.samples.shape} does not match "
                f"(H={self.height}, W={self.width})"
            )
        if self.samples.dtype != np.uint8:
            raise ValueError(f"samples must be uint8, got {self.samples.dtype}")

    # region Constructors
    @classmethod
    def from_samples(cls, width: int, height: int, samples) -> "NoiseGrid":
        """Build a grid from row-major values (flat iterable or 2D array)."""
        check_dims(width, height)
        if not hasattr(samples, "shape"):
            samples = list(samples)
        arr = np.asarray(samples, dtype=np.int64)
        if arr.size != width * height:
            raise ValueError(
                f"Expected {width * height} samples for {width}x{height}, got {arr.size}."
            )
        if arr.size and (arr.min() < 0 or arr.max() > MAX_SAMPLE):
            raise ValueError(f"Samples must lie in [0, {MAX_SAMPLE}].")
        return cls(width, height, arr.reshape(height, width).astype(np.uint8))

    @classmethod
    def constant(cls, width: int, height: int, value: int) -> "NoiseGrid":
        check_dims(width, height)
        if not 0 <= value <= MAX_SAMPLE:
            raise ValueError(f"value must lie in [0, {MAX_SAMPLE}], got {value}")
        return cls(width, height, np.full((height, width), value, dtype=np.uint8))
    # endregion

    def flat(self) -> np.ndarray:
        return self.samples.ravel(order="C")
