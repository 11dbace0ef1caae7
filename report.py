from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from flight_graph import FlightGraph
from shortest_paths import UNREACHABLE, RouteTable, Weight


DEFAULT_FUEL_RATE = 5.0
UNREACHABLE_MARKER = "Unreachable"


@dataclass(frozen=True)
class ReportRow:
    city: str
    cost: Weight
    distance: Weight
    fuel_cost: Weight

    @property
    def reachable(self) -> bool:
        return UNREACHABLE not in (self.cost, self.distance)


def fuel_cost(distance: Weight, fuel_rate: float = DEFAULT_FUEL_RATE) -> Weight:
    if distance == UNREACHABLE:
        return UNREACHABLE
    return distance * fuel_rate


def build_report(
    graph: FlightGraph,
    cost_table: RouteTable,
    distance_table: RouteTable,
    fuel_rate: float = DEFAULT_FUEL_RATE,
) -> List[ReportRow]:
    if cost_table.source != distance_table.source:
        raise ValueError(
            "Cost and distance tables were computed from different sources: "
            f"{cost_table.source} vs {distance_table.source}."
        )
    if len(cost_table) != len(distance_table) or len(cost_table) != len(graph):
        raise ValueError("Result tables do not cover the same set of cities.")

    rows: List[ReportRow] = []
    for index in range(len(graph)):
        name: Optional[str] = graph.name_of(index)
        rows.append(
            ReportRow(
                city=name if name is not None else f"#{index}",
                cost=cost_table[index],
                distance=distance_table[index],
                fuel_cost=fuel_cost(distance_table[index], fuel_rate),
            )
        )
    return rows


def format_report(rows: Sequence[ReportRow], source: str) -> str:
    lines = [
        f"Flight details from {source}:",
        f"{'City':<15}{'Cost (Rs)':<15}{'Distance (km)':<20}Fuel Cost (Rs)",
    ]
    for row in rows:
        # Either metric unreachable blanks out every numeric column.
        if not row.reachable:
            lines.append(
                f"{row.city:<15}{UNREACHABLE_MARKER:<15}"
                f"{UNREACHABLE_MARKER:<20}{UNREACHABLE_MARKER}"
            )
            continue
        lines.append(
            f"{row.city:<15}{row.cost!s:<15}"
            f"{row.distance:<20.2f}{row.fuel_cost:.2f}"
        )
    return "\n".join(lines)
