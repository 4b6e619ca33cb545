# graphstar/graphs/romania.py
# The AIMA Romania road map as a searchable graph: cities are nodes, roads are edges.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

from ..core.node import PathfindingMixin


# --- Data --------------------------------------------------------------------

# Road distances (bidirectional) from AIMA Fig. 3.1
_GRAPH: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
_SLD: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}


@dataclass(frozen=True)
class RomaniaMap:
    graph: Mapping[str, Mapping[str, int]]
    sld_to_bucharest: Mapping[str, int]


ROMANIA = RomaniaMap(graph=_GRAPH, sld_to_bucharest=_SLD)


# --- Node --------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class City(PathfindingMixin):
    """
    A city on a RomaniaMap. Equality, hash and ordering use the name only.

    estimated_cost(goal) = |SLD(city) - SLD(goal)|: by the triangle inequality the
    straight line between two cities is at least the gap between their distances
    to Bucharest, so the estimate stays admissible for any goal, not just Bucharest.
    """
    name: str
    data: RomaniaMap = field(default=ROMANIA, compare=False, repr=False)

    @property
    def connected_nodes(self) -> Tuple["City", ...]:
        return tuple(City(n, self.data) for n in self.data.graph[self.name])

    def cost(self, to: "City") -> float:
        return float(self.data.graph[self.name][to.name])

    def estimated_cost(self, to: "City") -> float:
        sld = self.data.sld_to_bucharest
        if self.name not in sld or to.name not in sld:
            return 0.0
        return float(abs(sld[self.name] - sld[to.name]))


def city(name: str, data: RomaniaMap = ROMANIA) -> City:
    """
    Factory for a City on `data`; unknown names raise KeyError.
    """
    if name not in data.graph:
        raise KeyError(f"unknown city {name!r}")
    return City(name, data)


def city_names(data: RomaniaMap = ROMANIA):
    return sorted(data.graph)
