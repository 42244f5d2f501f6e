"""Serialization / deserialization (serde) mixin for Pydantic models.

Wire forms use camelCase names and leave out optional fields that are unset,
so a component built in Python dumps exactly as a browser client expects it.

Example Usage:
b = Button(label="Add", action="calculate_add")

d = b.to_dict()      # {"type": "button", "label": "Add", "action": "calculate_add"}
js = b.to_json()

b1 = Button.from_json(js)
"""

from __future__ import annotations

from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

T = TypeVar("T", bound="BaseModel")


class SerdeMixin(BaseModel):
    """Mixin adding wire serialization and friendly validation errors."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # ---------- wire exports ----------
    def to_dict(self, **dump_kwargs: Any) -> dict[str, Any]:
        """Convert model to its wire dict (camelCase, unset optionals dropped)."""
        dump_kwargs.setdefault("by_alias", True)
        dump_kwargs.setdefault("exclude_none", True)
        return self.model_dump(mode="json", **dump_kwargs)

    def to_json(self, **dump_kwargs: Any) -> str:
        """Convert model to its wire JSON string."""
        dump_kwargs.setdefault("by_alias", True)
        dump_kwargs.setdefault("exclude_none", True)
        return self.model_dump_json(**dump_kwargs)

    # ---------- user-friendly loaders ----------
    @classmethod
    def from_json(cls: type[T], source: str, **kw: Any) -> T:
        """Instantiate model from a JSON document.

        Raises:
            ValueError: With a plain-English list of what is wrong, including
                when `source` is not JSON at all.
        """
        try:
            return cls.model_validate_json(source, **kw)
        except ValidationError as e:
            logger.debug(f"Validation of {cls.__name__} failed: {e}")
            raise ValueError(format_validation_error(e, subject=cls.__name__)) from e


# ---------- helpers: friendly error messages ----------
def format_validation_error(e: ValidationError, subject: str = "Input") -> str:
    """Turn Pydantic errors into actionable, plain-English guidance."""
    lines = [f"{subject} doesn’t match the expected structure:"]
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        detail = _humanize_error(loc, err.get("type", ""), err.get("msg", ""))
        lines.append(f"• {detail}")
    return "\n".join(lines)


def _humanize_error(loc: str, typ: str, msg: str) -> str:
    # Missing required field
    if "missing" in typ or "missing" in msg.lower():
        return f"Missing required field: `{loc}`."
    # Extra / unknown field
    if "extra_forbidden" in typ:
        return f"Unknown field at `{loc}`. Remove this key or rename it."
    # Wrong tag on a tagged union
    if "union_tag" in typ:
        return f"Unknown kind at `{loc or 'type'}`. {msg}"
    # Type error
    if "type" in typ or "value_error" in typ:
        return f"Wrong type at `{loc}`. {msg}"
    # Fallback
    nice = msg[0].upper() + msg[1:] if msg else "Invalid value."
    return f"{nice} (at `{loc}`)."
