"""
Street graph data structure with an adjacency list representation.

This module provides the Graph class: an immutable directed multigraph of street
intersections (nodes) and street segments (edges). Each edge is reachable from its
source node only, so neighbor lookups are not symmetric. Parallel edges between the
same ordered pair of nodes are kept as independent edges.

The graph is built once and never mutated; derived graphs are produced with
filter_edges.
"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Tuple

from .exceptions import GraphOperationError, NodeNotFoundError
from .models import Edge, Node

logger = logging.getLogger(__name__)


class Graph:
    """
    Immutable directed street graph.

    Node order is the order nodes were supplied in, and each node's outgoing edges
    keep the order edges were supplied in. Algorithms rely on this ordering for
    reproducible step narration.

    Attributes:
        _nodes (Mapping[str, Node]): Node ID to node, in insertion order
        _adjacency (Dict[str, Tuple[Edge, ...]]): Outgoing edges per source node
        _incoming (Dict[str, Tuple[Edge, ...]]): Incoming edges per target node
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]):
        """
        Build the graph from nodes and edges.

        Args:
            nodes: Intersections; IDs must be unique
            edges: Directed segments; both endpoints must be among the nodes

        Raises:
            GraphOperationError: On duplicate node IDs or edges referencing unknown nodes
        """
        node_map: Dict[str, Node] = {}
        for node in nodes:
            if node.id in node_map:
                raise GraphOperationError(f"Duplicate node id '{node.id}'")
            node_map[node.id] = node

        adjacency: Dict[str, List[Edge]] = {node_id: [] for node_id in node_map}
        incoming: Dict[str, List[Edge]] = {node_id: [] for node_id in node_map}
        edge_list: List[Edge] = []
        for edge in edges:
            for endpoint in (edge.source, edge.target):
                if endpoint not in node_map:
                    raise GraphOperationError(
                        f"Edge {edge.source} -> {edge.target} references unknown node '{endpoint}'"
                    )
            adjacency[edge.source].append(edge)
            incoming[edge.target].append(edge)
            edge_list.append(edge)

        self._nodes: Mapping[str, Node] = MappingProxyType(node_map)
        self._adjacency: Dict[str, Tuple[Edge, ...]] = {k: tuple(v) for k, v in adjacency.items()}
        self._incoming: Dict[str, Tuple[Edge, ...]] = {k: tuple(v) for k, v in incoming.items()}
        self._edges: Tuple[Edge, ...] = tuple(edge_list)
        logger.debug(f"Built graph with {len(self._nodes)} nodes and {len(self._edges)} edges")

    def has_node(self, node_id: str) -> bool:
        """Check if a node exists in the graph."""
        return node_id in self._nodes

    def get_node(self, node_id: str) -> Node:
        """
        Get a node by ID.

        Raises:
            NodeNotFoundError: If the node does not exist
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(f"Node '{node_id}' not found") from None

    def get_nodes(self) -> List[str]:
        """Get all node IDs in insertion order."""
        return list(self._nodes)

    @property
    def nodes(self) -> Mapping[str, Node]:
        """Read-only view of the node map."""
        return self._nodes

    def get_edges(self) -> Tuple[Edge, ...]:
        """Get all edges in insertion order."""
        return self._edges

    def neighbors_of(self, node_id: str) -> List[Tuple[str, Edge]]:
        """
        Get every outgoing edge of a node paired with its target ID.

        Raises:
            NodeNotFoundError: If the node does not exist
        """
        if node_id not in self._adjacency:
            raise NodeNotFoundError(f"Node '{node_id}' not found")
        return [(edge.target, edge) for edge in self._adjacency[node_id]]

    def get_edges_between(self, source: str, target: str) -> List[Edge]:
        """Get all parallel edges from source to target (empty if none)."""
        return [edge for edge in self._adjacency.get(source, ()) if edge.target == target]

    def has_edge(self, source: str, target: str) -> bool:
        """Check if at least one edge goes from source to target."""
        return bool(self.get_edges_between(source, target))

    def incoming_edges(self, node_id: str) -> Tuple[Edge, ...]:
        """Get all edges whose target is node_id."""
        if node_id not in self._incoming:
            raise NodeNotFoundError(f"Node '{node_id}' not found")
        return self._incoming[node_id]

    def filter_edges(self, predicate: Callable[[Edge], bool]) -> "Graph":
        """Return a new graph with the same nodes and only the edges matching predicate."""
        return Graph(self._nodes.values(), (edge for edge in self._edges if predicate(edge)))

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
