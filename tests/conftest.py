import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class FixedRandom:
    """Stand-in for random.Random that replays a fixed list of draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def randrange(self, stop):
        value = self.draws.pop(0)
        assert 0 <= value < stop
        return value

    def choice(self, seq):
        value = self.draws.pop(0)
        assert value in seq
        return value


@pytest.fixture
def fixed_random():
    return FixedRandom
