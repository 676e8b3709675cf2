import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from algorithms import compute_kruskal
from engine import PlaybackController, TickScheduler
from graph import Graph


class FakeClock:
    """Manually advanced clock for scheduler tests."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def sample_graph() -> Graph:
    return Graph.sample()


@pytest.fixture
def sample_result(sample_graph):
    return compute_kruskal(sample_graph.node_ids(), sample_graph.edge_list())


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock) -> TickScheduler:
    return TickScheduler(clock)


@pytest.fixture
def controller(scheduler, sample_result) -> PlaybackController:
    pc = PlaybackController(scheduler=scheduler, base_interval=2.0)
    pc.load(sample_result)
    return pc
