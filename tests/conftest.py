"""Shared test fixtures."""

import math
from typing import Callable, Iterable, List, Optional

import pytest

from streetroute.core.graph import Graph
from streetroute.core.models import Edge, Node
from streetroute.data import build_street_graph


def create_edge(
    source: str,
    target: str,
    weight: float,
    pedestrian_only: bool = False,
    time_vehicle: Optional[float] = None,
    time_pedestrian: Optional[float] = None,
) -> Edge:
    """Edge whose distance weight is `weight`; time weights default from it."""
    if time_vehicle is None:
        time_vehicle = math.inf if pedestrian_only else weight
    if time_pedestrian is None:
        time_pedestrian = weight * 2
    return Edge(
        source=source,
        target=target,
        distance=weight,
        max_speed=30.0,
        pedestrian_only=pedestrian_only,
        weight_distance=weight,
        weight_time_vehicle=time_vehicle,
        weight_time_pedestrian=time_pedestrian,
    )


def create_graph(edges: List[Edge], extra_nodes: Iterable[str] = ()) -> Graph:
    """Graph over the edge endpoints plus extra_nodes, in first-seen order."""
    node_ids: List[str] = []
    for edge in edges:
        for node_id in (edge.source, edge.target):
            if node_id not in node_ids:
                node_ids.append(node_id)
    for node_id in extra_nodes:
        if node_id not in node_ids:
            node_ids.append(node_id)
    return Graph([Node(id=n, name=f"Node {n}") for n in node_ids], edges)


@pytest.fixture
def make_edge() -> Callable[..., Edge]:
    """Factory fixture for edges."""
    return create_edge


@pytest.fixture
def make_graph() -> Callable[..., Graph]:
    """Factory fixture for graphs."""
    return create_graph


@pytest.fixture
def triangle_graph() -> Graph:
    """
    A -> B (5), B -> C (5), A -> C (20), plus an isolated D.

    The two-hop route A -> B -> C is cheaper than the direct edge.
    """
    edges = [
        create_edge("A", "B", 5.0),
        create_edge("B", "C", 5.0),
        create_edge("A", "C", 20.0),
    ]
    return create_graph(edges, extra_nodes=["D"])


@pytest.fixture
def diamond_graph() -> Graph:
    """
    A -> B (5), B -> C (5), A -> C (20), C -> D (2), B -> D (9), D -> A (1)
    A -> E (1, pedestrian only), E -> D (1)
    """
    edges = [
        create_edge("A", "B", 5.0),
        create_edge("B", "C", 5.0),
        create_edge("A", "C", 20.0),
        create_edge("C", "D", 2.0),
        create_edge("B", "D", 9.0),
        create_edge("D", "A", 1.0),
        create_edge("A", "E", 1.0, pedestrian_only=True),
        create_edge("E", "D", 1.0),
    ]
    return create_graph(edges)


@pytest.fixture(scope="session")
def street_graph() -> Graph:
    """The bundled street network."""
    return build_street_graph()
