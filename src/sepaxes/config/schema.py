# src/sepaxes/config/schema.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from ..errors import ConfigError

Validator = Callable[[Any], None]


# ------------------------------- KeySpec -----------------------------------
@dataclass(frozen=True)
class KeySpec:
    """
    Specification of one settings key.

    :param expected_type: Allowed type (or tuple of types) for the value.
                          Use ``(str, type(None))`` to allow ``None``.
    :param required: Whether the key must be present.
    :param validator: Optional callable that receives the value and raises
                      ``ValueError`` on invalid content.
    """
    expected_type: Union[type, Tuple[type, ...]]
    required: bool = False
    validator: Optional[Validator] = None

    def __post_init__(self) -> None:
        if self.validator is not None and not callable(self.validator):
            raise TypeError("KeySpec.validator must be callable or None")

    def accepts_type(self, value: Any) -> bool:
        types = self.expected_type if isinstance(self.expected_type, tuple) else (self.expected_type,)
        # bool is an int subclass; only accept it where bool is listed explicitly
        if isinstance(value, bool) and bool not in types:
            return False
        return isinstance(value, types)


# ----------------------------- Validators ------------------------------------
def make_choices_validator(choices: Iterable[Any]) -> Validator:
    """
    Build a validator that ensures the value is one of *choices*.

    :param choices: Allowed values (compared using equality).
    :return: A callable raising ``ValueError`` for values outside the set.
    """
    allowed = tuple(choices)

    def _validator(value: Any) -> None:
        if value not in allowed:
            raise ValueError(f"value {value!r} not in allowed set {list(allowed)!r}")

    return _validator


def make_range_validator(low: float, high: float, *, inclusive: bool = False) -> Validator:
    """
    Build a validator for numbers inside ``(low, high)`` (or ``[low, high]``).

    :param low: Lower bound.
    :param high: Upper bound.
    :param inclusive: Accept the bounds themselves.
    :return: A callable raising ``ValueError`` for out-of-range values.
    """
    def _validator(value: Any) -> None:
        ok = low <= value <= high if inclusive else low < value < high
        if not ok:
            brackets = "[]" if inclusive else "()"
            raise ValueError(f"value {value!r} outside {brackets[0]}{low}, {high}{brackets[1]}")

    return _validator


# ----------------------------- Validation ------------------------------------
def validate_section(
        values: Mapping[str, Any],
        schema: Mapping[str, KeySpec],
        *,
        section: str,
) -> Dict[str, Any]:
    """
    Validate one settings section against *schema*.

    Keys are matched case-insensitively and returned lower-cased.

    :param values: Raw key/value pairs (e.g. a JSON object).
    :param schema: Mapping of ``key -> KeySpec``.
    :param section: Section name used in error messages.
    :return: The validated values.
    :raises ConfigError: On unknown keys, missing required keys, wrong types, or
                         validator failures.
    """
    if not isinstance(values, Mapping):
        raise ConfigError(f"Section '{section}' must be a JSON object.")

    out: Dict[str, Any] = {}
    for raw_key, value in values.items():
        key = str(raw_key).lower()
        spec = schema.get(key)
        if spec is None:
            raise ConfigError(f"Unknown key '{section}.{raw_key}'. Known keys: {sorted(schema)}")
        if not spec.accepts_type(value):
            raise ConfigError(
                f"Key '{section}.{key}' has type {type(value).__name__}; expected {spec.expected_type}."
            )
        if spec.validator is not None:
            try:
                spec.validator(value)
            except ValueError as exc:
                raise ConfigError(f"Invalid value for '{section}.{key}': {exc}") from exc
        out[key] = value

    missing = [key for key, spec in schema.items() if spec.required and key not in out]
    if missing:
        raise ConfigError(f"Missing required key(s) in '{section}': {', '.join(missing)}")
    return out
