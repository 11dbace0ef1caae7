from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from heapq import heappop, heappush
from typing import Callable, List, Tuple, Union

from flight_graph import Flight, FlightGraph, FlightGraphError, SourceNotFoundError


logger = logging.getLogger(__name__)

UNREACHABLE = float("inf")

Weight = Union[int, float]
WeightAccessor = Callable[[Flight], Weight]


class NegativeWeightError(FlightGraphError, ValueError):
    def __init__(self, origin: int, flight: Flight, weight: Weight) -> None:
        super().__init__(
            f"Negative weight {weight!r} on flight {origin} -> {flight.destination}."
        )
        self.weight = weight


class Metric(Enum):
    COST = "cost"
    DISTANCE = "distance"

    def weight(self, flight: Flight) -> Weight:
        return getattr(flight, self.value)


@dataclass(frozen=True)
class RouteTable:
    """Minimum accumulated weight from ``source`` to every city, by index."""

    source: str
    metric: str
    values: Tuple[Weight, ...]

    def __getitem__(self, index: int) -> Weight:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def is_reachable(self, index: int) -> bool:
        return self.values[index] != UNREACHABLE

    @property
    def reachable_count(self) -> int:
        return sum(1 for value in self.values if value != UNREACHABLE)

    def value_for(self, graph: FlightGraph, name: str) -> Weight:
        return self.values[graph.index_of(name)]


def _relax_all(
    graph: FlightGraph, source_index: int, weight: WeightAccessor
) -> List[Weight]:
    best: List[Weight] = [UNREACHABLE] * graph.num_cities
    best[source_index] = 0

    queue: List[Tuple[Weight, int]] = [(0, source_index)]

    while queue:
        weight_u, u = heappop(queue)
        if weight_u > best[u]:
            continue

        for flight in graph.neighbors(u):
            v = flight.destination
            flight_weight = weight(flight)
            if flight_weight < 0:
                raise NegativeWeightError(u, flight, flight_weight)
            candidate = weight_u + flight_weight
            if candidate < best[v]:
                best[v] = candidate
                heappush(queue, (candidate, v))

    return best


def shortest_from(
    graph: FlightGraph,
    source: str,
    metric: Union[Metric, WeightAccessor] = Metric.COST,
) -> RouteTable:
    """Run Dijkstra from ``source`` summing the weight selected by ``metric``.

    ``metric`` is either a :class:`Metric` or any callable mapping a
    :class:`Flight` to a non-negative weight. Every flight is traversable
    both ways, so a negative weight would form a negative cycle; relaxing
    one raises :class:`NegativeWeightError` instead.

    Raises :class:`SourceNotFoundError` when ``source`` is not a registered
    city, in which case no table is produced.
    """
    if source not in graph:
        raise SourceNotFoundError(source)

    if isinstance(metric, Metric):
        weight: WeightAccessor = metric.weight
        label = metric.value
    else:
        weight = metric
        label = getattr(metric, "__name__", "custom")

    source_index = graph.index_of(source)
    values = _relax_all(graph, source_index, weight)
    table = RouteTable(source=source, metric=label, values=tuple(values))
    logger.debug(
        "%s from %s: %d of %d cities reachable.",
        label,
        source,
        table.reachable_count,
        len(table),
    )
    return table


def compute_routes(graph: FlightGraph, source: str) -> Tuple[RouteTable, RouteTable]:
    """Cheapest cost table and shortest distance table from ``source``."""
    return (
        shortest_from(graph, source, Metric.COST),
        shortest_from(graph, source, Metric.DISTANCE),
    )
