import pytest


class FixedRng:
    """Returns queued values from randrange, then repeats the last one."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


@pytest.fixture
def rng():
    return FixedRng(25)
