import numpy as np
import pytest


class SequenceSource:
    """Random source that hands out a fixed list of values in order."""

    def __init__(self, values):
        self.values = list(values)

    def integers(self, low, high, size=None, dtype=np.int64):
        n = int(np.prod(size))
        out, self.values = self.values[:n], self.values[n:]
        assert len(out) == n, "sequence exhausted"
        return np.array(out, dtype=dtype).reshape(size)


class ConstantSource:
    def __init__(self, value):
        self.value = value

    def integers(self, low, high, size=None, dtype=np.int64):
        return np.full(size, self.value, dtype=dtype)


@pytest.fixture
def sequence_source():
    return SequenceSource


@pytest.fixture
def constant_source():
    return ConstantSource
