from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import yaml

from flight_graph import CityNotFoundError, FlightGraph
from report import DEFAULT_FUEL_RATE


logger = logging.getLogger(__name__)

FlightSpec = Tuple[str, str, int, float, float]


class InvalidInstanceError(ValueError):
    """Raised when an instance file or prompt answer breaks an input rule."""


@dataclass
class FlightInstance:
    cities: List[str]
    flights: List[FlightSpec] = field(default_factory=list)
    source: str = ""
    fuel_rate: float = DEFAULT_FUEL_RATE


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _positive_int(value: object, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise InvalidInstanceError(f"{what} must be a positive integer, got {value!r}.")
    return value


def positive_number(value: object, what: str) -> float:
    if not _is_number(value) or not math.isfinite(value) or value <= 0:
        raise InvalidInstanceError(f"{what} must be a positive number, got {value!r}.")
    return float(value)


def _city_name(value: object, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInstanceError(f"{what} must be a non-empty name, got {value!r}.")
    return value.strip()


def parse_flight(entry: Sequence[object], label: str) -> FlightSpec:
    if not isinstance(entry, (list, tuple)) or len(entry) != 5:
        raise InvalidInstanceError(
            f"{label} must list origin, destination, cost, distance and duration."
        )
    origin, target, cost, distance, duration = entry
    return (
        _city_name(origin, f"{label} origin"),
        _city_name(target, f"{label} destination"),
        _positive_int(cost, f"{label} cost"),
        positive_number(distance, f"{label} distance"),
        positive_number(duration, f"{label} duration"),
    )


def instance_from_config(config: Dict) -> FlightInstance:
    if not isinstance(config, dict):
        raise InvalidInstanceError("Instance configuration must be a mapping.")

    raw_cities = config.get("cities") or []
    if not isinstance(raw_cities, list) or not raw_cities:
        raise InvalidInstanceError("Instance must list at least one city.")
    cities = [
        _city_name(name, f"City {idx}") for idx, name in enumerate(raw_cities, start=1)
    ]

    raw_flights = config.get("flights") or []
    if not isinstance(raw_flights, list):
        raise InvalidInstanceError("'flights' must be a list.")
    flights = [
        parse_flight(entry, f"Flight {idx}")
        for idx, entry in enumerate(raw_flights, start=1)
    ]

    source = config.get("source", "")
    if source:
        source = _city_name(source, "Source city")

    fuel_rate = positive_number(
        config.get("fuel_rate", DEFAULT_FUEL_RATE), "Fuel rate"
    )
    return FlightInstance(cities=cities, flights=flights, source=source, fuel_rate=fuel_rate)


def load_instance(path: Path) -> FlightInstance:
    with path.open("r", encoding="utf-8") as handle:
        return instance_from_config(yaml.safe_load(handle))


def build_graph(instance: FlightInstance) -> Tuple[FlightGraph, List[FlightSpec]]:
    """Populate a graph from ``instance``.

    Flights naming an unknown city are skipped and returned so the caller
    can report them; the remaining flights are still added.
    """
    graph = FlightGraph(len(instance.cities))
    for index, name in enumerate(instance.cities):
        graph.register_city(name, index)

    skipped: List[FlightSpec] = []
    for flight in instance.flights:
        try:
            graph.add_flight(*flight)
        except CityNotFoundError as exc:
            logger.warning("Skipping flight %s -> %s: %s", flight[0], flight[1], exc)
            skipped.append(flight)
    return graph, skipped


InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ask_positive_int(prompt: str, input_fn: InputFn, output_fn: OutputFn) -> int:
    while True:
        answer = input_fn(prompt).strip()
        try:
            return _positive_int(int(answer), "Value")
        except (ValueError, InvalidInstanceError):
            output_fn("Invalid input. Please enter a positive integer.")


def _ask_name(prompt: str, input_fn: InputFn, output_fn: OutputFn) -> str:
    while True:
        answer = input_fn(prompt).strip()
        if answer:
            return answer.split()[0]
        output_fn("Invalid input. Please enter a name.")


def _ask_flight(
    number: int, input_fn: InputFn, output_fn: OutputFn
) -> FlightSpec:
    while True:
        output_fn(f"Flight {number}:")
        fields = input_fn(
            "  Enter source, destination, cost (Rs), distance (km), and duration (hours): "
        ).split()
        try:
            if len(fields) != 5:
                raise InvalidInstanceError("expected five values")
            origin, target, cost, distance, duration = fields
            return parse_flight(
                [origin, target, int(cost), float(distance), float(duration)],
                f"Flight {number}",
            )
        except (ValueError, InvalidInstanceError):
            output_fn(
                "Invalid input. Please enter positive values for cost, distance, and duration."
            )


def prompt_instance(
    input_fn: Optional[InputFn] = None, output_fn: Optional[OutputFn] = None
) -> FlightInstance:
    """Collect an instance interactively, re-prompting on invalid answers."""
    input_fn = input_fn or input
    output_fn = output_fn or print
    num_cities = _ask_positive_int("Enter the number of cities: ", input_fn, output_fn)

    output_fn("Enter the names of the cities:")
    cities = [
        _ask_name(f"  City {idx}: ", input_fn, output_fn)
        for idx in range(1, num_cities + 1)
    ]

    num_flights = _ask_positive_int("Enter the number of flights: ", input_fn, output_fn)
    flights = [
        _ask_flight(idx, input_fn, output_fn) for idx in range(1, num_flights + 1)
    ]

    source = _ask_name("Enter the source city: ", input_fn, output_fn)
    return FlightInstance(cities=cities, flights=flights, source=source)
