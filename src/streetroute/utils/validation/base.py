"""
Base validation components for the street routing system.

Two kinds of check live here:
- RangeRule guards numeric settings such as walking speed and playback interval
- DataclassRule, applied through @validate_dataclass, enforces the declared field
  types of the frozen graph models at construction time

Both report through plain booleans; callers decide which exception to raise.
ValidationResult carries batch outcomes for the schema validator.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, Union, get_args, get_origin, get_type_hints


@dataclass
class ValidationResult:
    """
    Outcome of validating one or more raw records.

    Attributes:
        is_valid (bool): True when no errors were found
        errors (List[str]): Messages for records that failed
        warnings (List[str]): Non-fatal notes, e.g. an unregistered record kind
        context (Optional[Dict[str, Any]]): Record kind and count
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


class ValidationRule:
    """
    A single yes/no check.

    Attributes:
        error_message (str): Description used by callers when the check fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        raise NotImplementedError(f"{type(self).__name__} does not implement validate()")


class RangeRule(ValidationRule):
    """
    Numeric range check.

    A bound left as None is open. Booleans and NaN never pass, infinity passes
    whenever the relevant bound allows it.

    Attributes:
        min_value (Optional[float]): Lower bound
        max_value (Optional[float]): Upper bound, always inclusive
        inclusive_min (bool): Whether min_value itself passes
    """

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        error_message: str = "",
        inclusive_min: bool = True,
    ):
        super().__init__(error_message)
        self.min_value = min_value
        self.max_value = max_value
        self.inclusive_min = inclusive_min

    def validate(self, value: Any) -> bool:
        """True if value is a real number inside the range."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if math.isnan(value):
            return False
        if self.min_value is not None:
            below = value < self.min_value if self.inclusive_min else value <= self.min_value
            if below:
                return False
        return self.max_value is None or value <= self.max_value


class DataclassRule(ValidationRule):
    """
    Field type check for dataclass instances.

    Understands the annotations the graph models use: plain classes, Optional[X],
    Tuple[X, ...] and fixed-length tuples. An int is accepted for a float field,
    a bool is not. Annotations it cannot check with isinstance pass.
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        super().__init__(error_message or f"Invalid field types in {dataclass_type.__name__}")
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _matches(self, value: Any, annotation: Any) -> bool:
        if annotation is Any:
            return True

        origin = get_origin(annotation)
        if origin is Union:
            members = get_args(annotation)
            return any(self._matches(value, member) for member in members)

        if annotation is type(None):
            return value is None
        if annotation is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)

        if origin is tuple:
            if not isinstance(value, tuple):
                return False
            args = get_args(annotation)
            if not args:
                return True
            if len(args) == 2 and args[1] is Ellipsis:
                return all(self._matches(item, args[0]) for item in value)
            return len(args) == len(value) and all(
                self._matches(item, arg) for item, arg in zip(value, args)
            )

        target = origin if origin is not None else annotation
        try:
            return isinstance(value, target)
        except TypeError:
            return True

    def validate(self, value: Any) -> bool:
        """True if value is an instance whose fields all match their annotations."""
        if not isinstance(value, self.dataclass_type):
            return False
        return all(
            self._matches(getattr(value, name), annotation)
            for name, annotation in self.type_hints.items()
        )


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Class decorator adding a field type check to a dataclass.

    The class' own __post_init__ runs first, so value errors keep their specific
    messages and the type check only reports what they did not catch.

    Example:
        >>> @validate_dataclass
        ... @dataclass(frozen=True)
        ... class Segment:
        ...     source: str
        ...     distance: float
    """
    original_post_init = getattr(cls, "__post_init__", None)
    rule = None

    def validated_post_init(self):
        nonlocal rule
        if original_post_init:
            original_post_init(self)
        if rule is None:
            rule = DataclassRule(cls)
        if not rule.validate(self):
            raise TypeError(rule.error_message)

    cls.__post_init__ = validated_post_init
    return cls
