"""
Schema Validation Components for raw street network records.

This module provides JSON schema-based validation for the raw records the street
graph is built from. It supports:
- Registration of JSON schemas per record kind ("intersection", "segment")
- Validation of single records against their registered schema
- Batch validation with a merged report

Records are validated before any model object is constructed, so malformed data is
reported with the offending record index instead of a bare model error.
"""

from typing import Any, Dict, Iterable

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

INTERSECTION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "name": {"type": "string", "minLength": 1},
        "lat": {"type": "number", "minimum": -90, "maximum": 90},
        "lon": {"type": "number", "minimum": -180, "maximum": 180},
    },
    "required": ["id", "name", "lat", "lon"],
}

SEGMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "source": {"type": "string", "minLength": 1},
        "target": {"type": "string", "minLength": 1},
        "distance": {"type": "number", "exclusiveMinimum": 0},
        "max_speed": {"type": "number", "exclusiveMinimum": 0},
        "pedestrian_only": {"type": "boolean"},
    },
    "required": ["source", "target", "distance", "max_speed", "pedestrian_only"],
}


class SchemaValidator:
    """
    JSON Schema-based validator for raw dataset records.

    Attributes:
        schemas (Dict[str, Dict[str, Any]]): Record kind to JSON schema mapping
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the validator.

        Args:
            register_defaults: Register the intersection and segment schemas
        """
        self.schemas: Dict[str, Dict[str, Any]] = {}
        if register_defaults:
            self.register_schema("intersection", INTERSECTION_SCHEMA)
            self.register_schema("segment", SEGMENT_SCHEMA)

    def register_schema(self, kind: str, schema: Dict[str, Any]) -> None:
        """Register a JSON schema for a record kind."""
        self.schemas[kind] = schema

    def validate_record(self, kind: str, record: Dict[str, Any]) -> ValidationResult:
        """
        Validate a record against the schema registered for its kind.

        If no schema is registered for the kind, a warning is included in the
        validation result and the record is considered valid.

        Example:
            >>> validator = SchemaValidator()
            >>> record = {"id": "A", "name": "Alpha", "lat": 1.2, "lon": -77.3}
            >>> validator.validate_record("intersection", record).is_valid
            True
        """
        errors = []
        warnings = []

        schema = self.schemas.get(kind)
        if schema:
            try:
                json_validate(instance=record, schema=schema)
            except JsonSchemaError as e:
                errors.append(f"Schema validation failed: {e.message}")
        else:
            warnings.append(f"No schema registered for record kind: {kind}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"kind": kind},
        )

    def validate_records(self, kind: str, records: Iterable[Dict[str, Any]]) -> ValidationResult:
        """Validate many records, prefixing each error with the record index."""
        errors = []
        warnings = []
        count = 0
        for index, record in enumerate(records):
            count += 1
            result = self.validate_record(kind, record)
            errors.extend(f"{kind}[{index}]: {error}" for error in result.errors)
            warnings.extend(result.warnings[:1] if not warnings else [])

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"kind": kind, "records": count},
        )
