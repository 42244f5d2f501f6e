"""Typed views over action payloads.

Widgets send one of two shapes back with an action:

- input and select widgets send ``{"value": ...}`` (`ValuePayload`)
- forms send a field-name keyed mapping (`FieldsPayload`)

Handlers read payloads only through these views so a malformed payload
surfaces as `BadPayloadError` rather than an arbitrary exception.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from chatuix.core.dispatcher.errors import BadPayloadError
from chatuix.utils.serde import format_validation_error

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class ValuePayload(BaseModel):
    """Payload carrying a single ``value`` (extra keys are tolerated)."""

    model_config = ConfigDict(extra="allow", frozen=True)

    action: str
    value: Any

    @classmethod
    def read(cls, action: str, payload: Any) -> "ValuePayload":
        """Validate a raw payload for `action`.

        Raises:
            BadPayloadError: If the payload is not a mapping with a ``value``.
        """
        if not isinstance(payload, Mapping):
            raise BadPayloadError(
                action, f"expected a mapping, got {type(payload).__name__}"
            )
        try:
            return cls.model_validate({**payload, "action": action})
        except ValidationError as e:
            raise BadPayloadError(
                action, format_validation_error(e, subject="Payload")
            ) from e

    def as_text(self) -> str:
        """Return the value as display text."""
        if self.value is None:
            raise BadPayloadError(self.action, "value is null")
        return str(self.value)

    def as_float(self) -> float:
        """Parse the value as a float; unparseable text becomes nan."""
        if isinstance(self.value, bool):
            raise BadPayloadError(self.action, "value must be a number or text")
        if isinstance(self.value, (int, float)):
            return float(self.value)
        try:
            return float(self.as_text().strip())
        except ValueError:
            return math.nan

    def as_int(self) -> int:
        """Read the leading integer of the value, the way a rating is typed.

        Numbers are truncated toward zero and text is read up to the first
        non-digit (``"4.5"`` gives 4). A value with no leading digits gives 0.
        """
        if isinstance(self.value, bool):
            return 0
        if isinstance(self.value, int):
            return self.value
        if isinstance(self.value, float):
            return int(self.value) if math.isfinite(self.value) else 0
        match = _LEADING_INT.match(str(self.value))
        return int(match.group()) if match else 0


class FieldsPayload:
    """Read-only view over a submitted form's field mapping."""

    def __init__(self, action: str, fields: Mapping[str, Any]) -> None:
        """Wrap an already validated field mapping."""
        self.action = action
        self._fields = dict(fields)

    @classmethod
    def read(cls, action: str, payload: Any) -> "FieldsPayload":
        """Validate a raw payload for `action`.

        Raises:
            BadPayloadError: If the payload is not a string-keyed mapping.
        """
        if not isinstance(payload, Mapping):
            raise BadPayloadError(
                action, f"expected form fields, got {type(payload).__name__}"
            )
        if not all(isinstance(k, str) for k in payload):
            raise BadPayloadError(action, "form field names must be strings")
        return cls(action, payload)

    def get_text(self, name: str) -> str:
        """Return a required field as text.

        Raises:
            BadPayloadError: If the field is absent.
        """
        if name not in self._fields:
            raise BadPayloadError(self.action, f"missing form field `{name}`")
        return str(self._fields[name])

    def to_dict(self) -> Dict[str, Any]:
        """Return a copy of the submitted fields."""
        return dict(self._fields)
