"""Bundled street network data."""

from .street_network import (
    RAW_NODES,
    SEGMENT_DATA,
    build_street_graph,
    parse_node_records,
    parse_segment_records,
)

__all__ = [
    "RAW_NODES",
    "SEGMENT_DATA",
    "build_street_graph",
    "parse_node_records",
    "parse_segment_records",
]
