"""
Tests for validation utilities.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import pytest

from streetroute.utils.validation import RangeRule, SchemaValidator, validate_dataclass


@validate_dataclass
@dataclass(frozen=True)
class Sample:
    name: str
    weight: float
    tags: Tuple[str, ...] = ()
    note: Optional[str] = None


class TestRangeRule:
    """Tests for numeric range validation."""

    def test_closed_range(self):
        rule = RangeRule(0, 10)
        assert rule.validate(0)
        assert rule.validate(10)
        assert not rule.validate(11)
        assert not rule.validate(-0.1)

    def test_exclusive_minimum(self):
        rule = RangeRule(min_value=0, inclusive_min=False)
        assert not rule.validate(0)
        assert rule.validate(0.001)

    def test_rejects_non_numbers(self):
        rule = RangeRule()
        assert not rule.validate(True)
        assert not rule.validate("1")
        assert not rule.validate(math.nan)
        assert rule.validate(math.inf)


class TestValidateDataclass:
    """Tests for runtime dataclass type checking."""

    def test_valid_instance(self):
        sample = Sample(name="a", weight=1, tags=("x", "y"))
        assert sample.weight == 1

    def test_wrong_field_type(self):
        with pytest.raises(TypeError, match="Invalid field types in Sample"):
            Sample(name=1, weight=1.0)  # type: ignore[arg-type]

    def test_wrong_tuple_item(self):
        with pytest.raises(TypeError):
            Sample(name="a", weight=1.0, tags=("x", 2))  # type: ignore[arg-type]

    def test_bool_is_not_float(self):
        with pytest.raises(TypeError):
            Sample(name="a", weight=True)


class TestSchemaValidator:
    """Tests for JSON schema validation of raw records."""

    def test_valid_intersection(self):
        record = {"id": "A", "name": "Alpha", "lat": 1.2, "lon": -77.3}
        result = SchemaValidator().validate_record("intersection", record)
        assert result.is_valid
        assert result.errors == []

    def test_missing_field(self):
        record = {"id": "A", "name": "Alpha", "lat": 1.2}
        result = SchemaValidator().validate_record("intersection", record)
        assert not result.is_valid
        assert "'lon' is a required property" in result.errors[0]

    def test_unknown_kind_warns(self):
        result = SchemaValidator().validate_record("bridge", {})
        assert result.is_valid
        assert result.warnings == ["No schema registered for record kind: bridge"]

    def test_batch_errors_carry_index(self):
        segment = {"source": "A", "target": "B", "max_speed": 30, "pedestrian_only": False}
        records = [{**segment, "distance": 10}, {**segment, "distance": 0}]
        result = SchemaValidator().validate_records("segment", records)
        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].startswith("segment[1]: Schema validation failed")
        assert result.context == {"kind": "segment", "records": 2}

    def test_custom_schema(self):
        validator = SchemaValidator(register_defaults=False)
        validator.register_schema("tag", {"type": "string"})
        assert validator.validate_record("tag", "x").is_valid
        assert not validator.validate_record("tag", 1).is_valid
