import pytest

from flight_graph import FlightGraph


@pytest.fixture
def triangle():
    """A-B-C triangle where the direct A-C flight is more expensive."""
    g = FlightGraph(3)
    for idx, name in enumerate(["A", "B", "C"]):
        g.register_city(name, idx)
    g.add_flight("A", "B", 100, 500.0, 1.0)
    g.add_flight("B", "C", 50, 300.0, 0.5)
    g.add_flight("A", "C", 200, 1000.0, 2.0)
    return g


@pytest.fixture
def with_isolated():
    g = FlightGraph(4)
    for idx, name in enumerate(["A", "B", "C", "D"]):
        g.register_city(name, idx)
    g.add_flight("A", "B", 100, 500.0, 1.0)
    g.add_flight("B", "C", 50, 300.0, 0.5)
    g.add_flight("A", "C", 200, 1000.0, 2.0)
    return g
