"""
Fixed street network: 31 intersections between Calle 16-20 and Carrera 24-29.

Segments are directed. Each record reads
``source;target;distance_m;max_speed_kmh;pedestrian_only``. Identifiers are
upper-cased when the graph is built, so "C18a_K25" and "C18A_K25" name the same
intersection.
"""

import logging
from typing import Any, Dict, List, Optional

from ..config import NetworkConfig
from ..core.exceptions import ValidationError
from ..core.graph import Graph
from ..core.models import Edge, Node
from ..utils.validation import SchemaValidator

logger = logging.getLogger(__name__)

# (id, name, lat, lon)
RAW_NODES = [
    ("C16_K24", "Calle 16 con Carrera 24", 1.2133110019206368, -77.28023488717908),
    ("C16_K25", "Calle 16 con Carrera 25", 1.214067360436424, -77.28057769259001),
    ("C16_K26", "Calle 16 con Carrera 26", 1.2149161054845712, -77.2809377390079),
    ("C16_K27", "Calle 16 con Carrera 27", 1.2158459502494583, -77.2813448421692),
    ("C16_K29", "Calle 16 con Carrera 29", 1.2173251850330515, -77.2823435646179),
    ("C17_K24", "Calle 17 con Carrera 24", 1.2136492055368984, -77.2794068067267),
    ("C17_K25", "Calle 17 con Carrera 25", 1.2144441093582743, -77.27974418689725),
    ("C17_K26", "Calle 17 con Carrera 26", 1.2152896878346036, -77.28011076960976),
    ("C17_K27", "Calle 17 con Carrera 27", 1.2162277837058029, -77.28051071052919),
    ("C17_K28", "Calle 17 con Carrera 28", 1.2169933253215022, -77.28082779759625),
    ("C17_K29", "Calle 17 con Carrera 29", 1.217818477845427, -77.2811729814518),
    ("C18_K24", "Calle 18 con Carrera 24", 1.214017213853392, -77.27855368277103),
    ("C18_K25", "Calle 18 con Carrera 25", 1.2148461425795107, -77.27889441429534),
    ("C18_K26", "Calle 18 con Carrera 26", 1.21568405223983, -77.27926990015229),
    ("C18_K27", "Calle 18 con Carrera 27", 1.2166076914622121, -77.27965285737024),
    ("C18_K28", "Calle 18 con Carrera 28", 1.2173746581229432, -77.28000482816276),
    ("C18_K29", "Calle 18 con Carrera 29", 1.2182357974946278, -77.28038253916655),
    ("C18A_K25", "Punto intermedio Calle 18a - Cra 25", 1.215032972084899, -77.27844403442283),
    ("C18A_K26", "Punto intermedio Calle 18a - Cra 26", 1.215919607898636, -77.27882879278238),
    ("C19_K24", "Calle 19 con Carrera 24", 1.2143417277384834, -77.27769571781681),
    ("C19_K25", "Calle 19 con Carrera 25", 1.2151772519788349, -77.27807187425633),
    ("C19_K26", "Calle 19 con Carrera 26", 1.2160825031323437, -77.27846571358744),
    ("C19_K27", "Calle 19 con Carrera 27", 1.2169717220065817, -77.27883938637183),
    ("C19_K28", "Calle 19 con Carrera 28", 1.2177751402244923, -77.27918000736679),
    ("C19_K29", "Calle 19 con Carrera 29", 1.2186165475722694, -77.27951615845953),
    ("C20_K24", "Calle 20 con Carrera 24", 1.2147598964503565, -77.27689476615224),
    ("C20_K25", "Calle 20 con Carrera 25", 1.2155787969161387, -77.2772494333722),
    ("C20_K26", "Calle 20 con Carrera 26", 1.2163839217523016, -77.27758610254952),
    ("C20_K27", "Calle 20 con Carrera 27", 1.2173568647788782, -77.277969849767),
    ("C20_K28", "Calle 20 con Carrera 28", 1.2182454580551343, -77.27835782440715),
    ("C20_K29", "Calle 20 con Carrera 29", 1.2190798304720984, -77.27872112332174),
]

SEGMENT_DATA = """\
C16_K24;C16_K25;94;40;FALSE
C16_K25;C16_K24;94;5;TRUE
C16_K25;C16_K26;100;30;FALSE
C16_K26;C16_K25;100;5;TRUE
C16_K26;C16_K27;110;15;FALSE
C16_K27;C16_K26;110;5;TRUE
C16_K27;C16_K29;200;40;FALSE
C16_K29;C16_K27;200;5;TRUE
C17_K24;C17_K25;96;5;TRUE
C17_K25;C17_K24;96;30;FALSE
C17_K25;C17_K26;100;5;TRUE
C17_K26;C17_K25;100;15;FALSE
C17_K26;C17_K27;110;5;TRUE
C17_K27;C17_K26;110;30;FALSE
C17_K27;C17_K28;92;5;TRUE
C17_K28;C17_K27;92;15;FALSE
C17_K28;C17_K29;100;5;TRUE
C17_K29;C17_K28;100;15;FALSE
C18_K24;C18_K25;100;15;FALSE
C18_K25;C18_K24;100;5;TRUE
C18_K25;C18_K26;100;15;FALSE
C18_K26;C18_K25;100;5;TRUE
C18_K26;C18_K27;110;15;FALSE
C18_K27;C18_K26;110;5;TRUE
C18_K27;C18_K28;94;40;FALSE
C18_K28;C18_K27;94;5;TRUE
C18_K28;C18_K29;110;30;FALSE
C18_K29;C18_K28;110;5;TRUE
C18_K25;C18a_K25;54;40;FALSE
C18a_K25;C18_K25;54;5;TRUE
C18_K26;C18a_K26;56;30;FALSE
C18a_K26;C18_K26;56;5;TRUE
C19_K24;C19_K25;110;5;TRUE
C19_K25;C19_K24;110;5;TRUE
C19_K25;C19_K26;110;5;TRUE
C19_K26;C19_K25;110;5;TRUE
C19_K26;C19_K27;110;5;TRUE
C19_K27;C19_K26;110;15;FALSE
C19_K27;C19_K28;97;5;TRUE
C19_K28;C19_K27;97;15;FALSE
C19_K28;C19_K29;100;5;TRUE
C19_K29;C19_K28;100;30;FALSE
C20_K24;C20_K25;99;15;FALSE
C20_K25;C20_K24;99;5;TRUE
C20_K25;C20_K26;97;15;FALSE
C20_K26;C20_K25;97;5;TRUE
C20_K26;C20_K27;120;15;FALSE
C20_K27;C20_K26;120;5;TRUE
C20_K27;C20_K28;110;40;FALSE
C20_K28;C20_K27;110;5;TRUE
C20_K28;C20_K29;100;30;FALSE
C20_K29;C20_K28;90;5;TRUE
C16_K24;C17_K24;100;5;TRUE
C17_K24;C16_K24;100;15;FALSE
C17_K24;C18_K24;100;5;TRUE
C18_K24;C17_K24;100;15;FALSE
C18_K24;C19_K24;100;5;TRUE
C19_K24;C18_K24;100;15;FALSE
C19_K24;C20_K24;90;5;TRUE
C20_K24;C19_K24;100;40;FALSE
C18_K25;C19_K24;141;5;TRUE
C19_K25;C18_K24;147;5;TRUE
C19_K24;C18_K25;141;5;TRUE
C18_K24;C19_K25;147;5;TRUE
C18A_K25;C19_K25;44;5;FALSE
C18A_K26;C18A_K25;110;5;TRUE
C18A_K25;C18A_K26;110;5;TRUE
C18A_K26;C19_K26;44;30;FALSE
C19_K26;C18A_K26;44;5;TRUE
C16_K25;C17_K25;100;15;FALSE
C17_K25;C16_K25;100;5;TRUE
C17_K25;C18_K25;110;15;FALSE
C18_K25;C17_K25;110;5;TRUE
C19_K25;C20_K25;100;15;FALSE
C20_K25;C19_K25;100;5;TRUE
C16_K26;C17_K26;100;30;FALSE
C17_K26;C16_K26;100;5;TRUE
C17_K26;C18_K26;100;30;FALSE
C18_K26;C17_K26;100;5;TRUE
C19_K26;C20_K26;100;15;FALSE
C20_K26;C19_K26;100;5;TRUE
C16_K27;C17_K27;100;40;FALSE
C17_K27;C16_K27;100;30;FALSE
C17_K27;C18_K27;100;30;FALSE
C18_K27;C17_K27;100;15;FALSE
C18_K27;C19_K27;99;30;FALSE
C19_K27;C18_K27;99;15;FALSE
C19_K27;C20_K27;110;15;FALSE
C20_K27;C19_K27;110;15;FALSE
C17_K28;C18_K28;100;5;TRUE
C18_K28;C17_K28;100;30;FALSE
C18_K28;C19_K28;100;5;TRUE
C19_K28;C18_K28;100;15;FALSE
C19_K28;C20_K28;110;5;TRUE
C20_K28;C19_K28;110;30;FALSE
C16_K29;C17_K29;140;40;FALSE
C17_K29;C16_K29;140;5;TRUE
C17_K29;C18_K29;99;15;FALSE
C18_K29;C17_K29;99;5;TRUE
C18_K29;C19_K29;110;15;FALSE
C19_K29;C18_K29;110;5;TRUE
C19_K29;C20_K29;100;15;FALSE
C20_K29;C19_K29;100;5;TRUE
C16_K27;C17_K28;135;5;TRUE
C17_K28;C16_K27;135;5;TRUE
C16_K29;C17_K28;172;5;TRUE
C17_K28;C16_K29;172;5;TRUE
"""


def parse_node_records() -> List[Dict[str, Any]]:
    """Raw intersections as dictionaries."""
    return [
        {"id": node_id, "name": name, "lat": lat, "lon": lon}
        for node_id, name, lat, lon in RAW_NODES
    ]


def parse_segment_records(data: str = SEGMENT_DATA) -> List[Dict[str, Any]]:
    """
    Parse semicolon-separated segment lines into dictionaries.

    Blank lines are skipped. Numeric fields that do not parse are kept as strings so
    schema validation can report them.

    Raises:
        ValidationError: If a line does not have exactly five fields
    """
    records = []
    for line_no, line in enumerate(data.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        fields = line.split(";")
        if len(fields) != 5:
            raise ValidationError(f"Segment line {line_no} has {len(fields)} fields, expected 5")
        source, target, distance, speed, pedestrian = fields
        records.append(
            {
                "source": source,
                "target": target,
                "distance": _number(distance),
                "max_speed": _number(speed),
                "pedestrian_only": pedestrian.strip().upper() == "TRUE",
            }
        )
    return records


def _number(value: str):
    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError:
            return value


def build_street_graph(
    config: Optional[NetworkConfig] = None,
    node_records: Optional[List[Dict[str, Any]]] = None,
    segment_records: Optional[List[Dict[str, Any]]] = None,
    validator: Optional[SchemaValidator] = None,
) -> Graph:
    """
    Build the street graph, by default from the fixed dataset.

    Records are schema-validated first; identifiers are upper-cased and every edge
    gets its distance, vehicle-time and pedestrian-time weights precomputed.

    Raises:
        ValidationError: If any record fails schema validation
        GraphOperationError: If a segment references an unknown intersection
    """
    config = config or NetworkConfig()
    validator = validator or SchemaValidator()
    node_records = parse_node_records() if node_records is None else node_records
    segment_records = parse_segment_records() if segment_records is None else segment_records

    for kind, records in (("intersection", node_records), ("segment", segment_records)):
        report = validator.validate_records(kind, records)
        if not report.is_valid:
            raise ValidationError("; ".join(report.errors))

    nodes = [
        Node(id=record["id"].upper(), name=record["name"], lat=record["lat"], lon=record["lon"])
        for record in node_records
    ]
    edges = [
        Edge.from_segment(
            source=record["source"].upper(),
            target=record["target"].upper(),
            distance=record["distance"],
            max_speed=record["max_speed"],
            pedestrian_only=record["pedestrian_only"],
            walking_speed=config.walking_speed_kmh,
            time_precision=config.time_precision,
        )
        for record in segment_records
    ]
    graph = Graph(nodes, edges)
    logger.info(
        f"Loaded street network: {graph.node_count} intersections, {graph.edge_count} segments"
    )
    return graph
