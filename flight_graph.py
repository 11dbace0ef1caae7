from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


logger = logging.getLogger(__name__)


class FlightGraphError(Exception):
    """Base class for failures raised by the flight network."""


class CityNotFoundError(FlightGraphError, LookupError):
    label = "City"

    def __init__(self, name: str) -> None:
        super().__init__(f"{self.label} not found: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class SourceNotFoundError(CityNotFoundError):
    label = "Source city"


@dataclass(frozen=True)
class City:
    name: str
    index: int


@dataclass(frozen=True)
class Flight:
    destination: int
    cost: int
    distance: float
    duration: float


class FlightGraph:
    """Undirected multigraph of cities connected by flights.

    Cities occupy dense indices in ``[0, num_cities)``. Every flight is
    stored twice, once in the adjacency list of each endpoint, so both
    directions carry identical attributes.
    """

    def __init__(self, num_cities: int) -> None:
        if isinstance(num_cities, bool) or not isinstance(num_cities, int) or num_cities <= 0:
            raise ValueError(f"Number of cities must be a positive integer, got {num_cities!r}.")
        self.num_cities = num_cities
        self._names: List[Optional[str]] = [None] * num_cities
        self._index: Dict[str, int] = {}
        self._adjacency: List[List[Flight]] = [[] for _ in range(num_cities)]
        self._flight_count = 0

    def register_city(self, name: str, index: int) -> None:
        # Duplicate names are not rejected: the latest registration wins.
        if not 0 <= index < self.num_cities:
            raise IndexError(f"City index {index} outside [0, {self.num_cities}).")
        previous = self._index.get(name)
        if previous is not None and previous != index:
            logger.warning(
                "City name %r re-registered at index %d (previously %d).",
                name,
                index,
                previous,
            )
        self._index[name] = index
        self._names[index] = name

    def add_flight(
        self, u: str, v: str, cost: int, distance: float, duration: float
    ) -> None:
        for name in (u, v):
            if name not in self._index:
                raise CityNotFoundError(name)
        u_index = self._index[u]
        v_index = self._index[v]
        self._adjacency[u_index].append(Flight(v_index, cost, distance, duration))
        self._adjacency[v_index].append(Flight(u_index, cost, distance, duration))
        self._flight_count += 1

    def neighbors(self, index: int) -> List[Flight]:
        return self._adjacency[index]

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise CityNotFoundError(name) from None

    def name_of(self, index: int) -> Optional[str]:
        return self._names[index]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return self.num_cities

    @property
    def city_names(self) -> List[Optional[str]]:
        return list(self._names)

    @property
    def flight_count(self) -> int:
        """Number of logical (undirected) flights added so far."""
        return self._flight_count

    def cities(self) -> Iterator[City]:
        for index, name in enumerate(self._names):
            if name is not None:
                yield City(name, index)
