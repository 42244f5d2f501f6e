"""UI component descriptors rendered inline in the chat transcript.

Each variant is a frozen Pydantic model tagged by ``type``. Components carry
only what a renderer needs to draw the widget and the action it triggers when
the user interacts with it.

Notes/Assumptions:
    - Wire names are camelCase (``submitLabel``, ``inputType``, ``chartType``).
    - Optional fields that are unset are omitted from the wire form.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import ConfigDict, Field

from chatuix.utils.serde import SerdeMixin

ButtonVariant = Literal["primary", "secondary", "danger"]
ChartType = Literal["line", "bar", "pie"]


class _Frozen(SerdeMixin):
    """Base for immutable component parts."""

    model_config = ConfigDict(frozen=True)


class FormField(_Frozen):
    """One labelled field of a form."""

    label: str
    name: str
    type: str = "text"
    placeholder: Optional[str] = None


class ChartPoint(_Frozen):
    """A named data point; extra keys are kept for multi-series charts."""

    model_config = ConfigDict(extra="allow")

    name: str
    value: Union[int, float]


class CardAction(_Frozen):
    """A labelled action button shown on a card."""

    label: str
    action: str


class SelectOption(_Frozen):
    """One option of a select widget."""

    value: str
    label: str


class Button(_Frozen):
    """A clickable button that fires `action` with no payload."""

    type: Literal["button"] = "button"
    label: str
    action: str
    variant: Optional[ButtonVariant] = None


class Input(_Frozen):
    """A single text input; submits ``{"value": ...}`` to `action`."""

    type: Literal["input"] = "input"
    label: str
    action: str
    placeholder: Optional[str] = None
    input_type: Optional[str] = None


class Form(_Frozen):
    """A multi-field form; submits a field-name keyed mapping to `action`."""

    type: Literal["form"] = "form"
    fields: List[FormField]
    submit_label: str
    action: str


class Table(_Frozen):
    """A read-only table."""

    type: Literal["table"] = "table"
    headers: List[str]
    rows: List[List[str]]
    caption: Optional[str] = None


class Chart(_Frozen):
    """A line, bar or pie chart over named points."""

    type: Literal["chart"] = "chart"
    chart_type: ChartType
    data: List[ChartPoint]
    title: Optional[str] = None
    x_key: Optional[str] = None
    y_key: Optional[str] = None


class Card(_Frozen):
    """A titled card with optional action buttons."""

    type: Literal["card"] = "card"
    title: str
    content: str
    actions: Optional[List[CardAction]] = None


class ItemList(_Frozen):
    """A bulleted or numbered list of strings."""

    type: Literal["list"] = "list"
    items: List[str]
    ordered: Optional[bool] = None


class Select(_Frozen):
    """A drop-down; submits ``{"value": <option value>}`` to `action`."""

    type: Literal["select"] = "select"
    label: str
    options: List[SelectOption]
    action: str


UIComponent = Annotated[
    Union[Button, Input, Form, Table, Chart, Card, ItemList, Select],
    Field(discriminator="type"),
]


def interactive_actions(component: UIComponent) -> List[str]:
    """Return the action ids a component can fire, in display order."""
    if isinstance(component, (Button, Input, Form, Select)):
        return [component.action]
    if isinstance(component, Card):
        return [a.action for a in component.actions or []]
    return []
