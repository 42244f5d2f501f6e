"""Replies for widget-triggered actions.

Exact action ids map to handlers in `ACTION_HANDLERS`; ids not found there
are tried against the ordered `PREFIX_RULES`. Both are first-match-wins.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

from chatuix.core.components import (
    Button,
    Card,
    CardAction,
    Chart,
    ChartPoint,
    Form,
    FormField,
    ItemList,
    Select,
    SelectOption,
    Table,
)
from chatuix.core.constants import STAR_GLYPH
from chatuix.core.dispatcher.errors import DispatchError
from chatuix.core.dispatcher.payloads import FieldsPayload, ValuePayload
from chatuix.core.dispatcher.reply import Reply
from chatuix.core.dispatcher.state import (
    BOOKING_KEY,
    CALCULATOR_KEY,
    USER_KEY,
    Context,
    nested_get,
    spread_nested,
    with_keys,
)
from chatuix.utils.misc import format_number

ActionHandler = Callable[[str, Any, Context], Reply]

_CALCULATE_AGAIN = [CardAction(label="Calculate Again", action="show_form")]

_PLAN_FEATURES = {
    "Premium": [
        "Unlimited storage",
        "Priority 24/7 support",
        "Advanced analytics",
        "Custom integrations",
        "$29.99/month",
    ],
    "Basic": [
        "10GB storage",
        "Email support",
        "Advanced analytics",
        "Basic integrations",
        "$9.99/month",
    ],
}


# ---------------------------
# Forms and canned widgets
# ---------------------------


def submit_signup(action: str, payload: Any, context: Context) -> Reply:
    """Acknowledge a signup and remember the submitted fields."""
    form = FieldsPayload.read(action, payload)
    return Reply(
        content=(
            f"Thanks for signing up, {form.get_text('name')}! We've sent a"
            f" confirmation email to {form.get_text('email')}. 🎉"
        ),
        components=[
            Card(
                title="Registration Successful",
                content=(
                    "Welcome aboard! Your account has been created and you can"
                    " now access all features."
                ),
                actions=[CardAction(label="Go to Dashboard", action="goto_dashboard")],
            )
        ],
        context=with_keys(context, **{USER_KEY: form.to_dict()}),
    )


def show_table(action: str, payload: Any, context: Context) -> Reply:
    """Show the user activity report."""
    return Reply(
        content="Here's your requested data table:",
        components=[
            Table(
                caption="User Activity Report",
                headers=["User", "Actions", "Last Active", "Status"],
                rows=[
                    ["Alice Johnson", "45", "2 mins ago", "🟢 Online"],
                    ["Bob Smith", "32", "1 hour ago", "🟡 Away"],
                    ["Carol White", "78", "5 mins ago", "🟢 Online"],
                    ["David Brown", "23", "3 hours ago", "🔴 Offline"],
                ],
            )
        ],
        context=context,
    )


def show_chart(action: str, payload: Any, context: Context) -> Reply:
    """Show the weekly activity bar chart."""
    return Reply(
        content="Here's a visualization of your data:",
        components=[
            Chart(
                chart_type="bar",
                title="Weekly Activity",
                data=[
                    ChartPoint(name=day, value=value)
                    for day, value in [
                        ("Mon", 12),
                        ("Tue", 19),
                        ("Wed", 15),
                        ("Thu", 25),
                        ("Fri", 22),
                        ("Sat", 8),
                        ("Sun", 5),
                    ]
                ],
            )
        ],
        context=context,
    )


def show_form(action: str, payload: Any, context: Context) -> Reply:
    """Show the contact form."""
    return Reply(
        content="Here's a contact form:",
        components=[
            Form(
                fields=[
                    FormField(
                        label="Name", name="name", type="text", placeholder="Your name"
                    ),
                    FormField(
                        label="Email",
                        name="email",
                        type="email",
                        placeholder="your@email.com",
                    ),
                    FormField(
                        label="Message",
                        name="message",
                        type="text",
                        placeholder="Your message...",
                    ),
                ],
                submit_label="Send Message",
                action="submit_contact",
            )
        ],
        context=context,
    )


# ---------------------------
# Calculator flow
# ---------------------------


def set_num1(action: str, payload: Any, context: Context) -> Reply:
    """Store the first operand, keeping the second."""
    value = ValuePayload.read(action, payload)
    return Reply(
        content=f"First number set to {value.as_text()}. Now enter the second number.",
        context=spread_nested(context, CALCULATOR_KEY, num1=value.as_float()),
    )


def set_num2(action: str, payload: Any, context: Context) -> Reply:
    """Store the second operand, keeping the first."""
    value = ValuePayload.read(action, payload)
    return Reply(
        content=f"Second number set to {value.as_text()}. Click a button to calculate.",
        context=spread_nested(context, CALCULATOR_KEY, num2=value.as_float()),
    )


def _operand(context: Context, key: str) -> float:
    value = nested_get(context, CALCULATOR_KEY, key)
    # nan, or the null it becomes on the wire
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return 0
    return value


def _operands(context: Context) -> Tuple[float, float]:
    """Read both operands; an absent or unparsed operand counts as 0."""
    return _operand(context, "num1"), _operand(context, "num2")


def calculate_add(action: str, payload: Any, context: Context) -> Reply:
    """Add the stored operands."""
    num1, num2 = _operands(context)
    result = num1 + num2
    a, b, r = format_number(num1), format_number(num2), format_number(result)
    return Reply(
        content=f"Result: {a} + {b} = {r}",
        components=[
            Card(
                title="Calculation Result",
                content=f"The sum is {r}",
                actions=_CALCULATE_AGAIN,
            )
        ],
        context=context,
    )


def calculate_multiply(action: str, payload: Any, context: Context) -> Reply:
    """Multiply the stored operands."""
    num1, num2 = _operands(context)
    result = num1 * num2
    a, b, r = format_number(num1), format_number(num2), format_number(result)
    return Reply(
        content=f"Result: {a} × {b} = {r}",
        components=[
            Card(
                title="Calculation Result",
                content=f"The product is {r}",
                actions=_CALCULATE_AGAIN,
            )
        ],
        context=context,
    )


# ---------------------------
# Booking flow
# ---------------------------


def select_date(action: str, payload: Any, context: Context) -> Reply:
    """Record the date (step 2) and offer time slots."""
    date = ValuePayload.read(action, payload).as_text()
    return Reply(
        content=f"Great! You selected {date}. Now choose a time slot:",
        components=[
            Select(
                label="Choose a time",
                options=[
                    SelectOption(value="09:00", label="9:00 AM"),
                    SelectOption(value="10:00", label="10:00 AM"),
                    SelectOption(value="11:00", label="11:00 AM"),
                    SelectOption(value="14:00", label="2:00 PM"),
                    SelectOption(value="15:00", label="3:00 PM"),
                    SelectOption(value="16:00", label="4:00 PM"),
                ],
                action="select_time",
            )
        ],
        context=spread_nested(context, BOOKING_KEY, date=date, step=2),
    )


def select_time(action: str, payload: Any, context: Context) -> Reply:
    """Record the time slot and confirm the booking."""
    time_slot = ValuePayload.read(action, payload).as_text()
    date = nested_get(context, BOOKING_KEY, "date")
    if date is None:
        raise DispatchError("A time was selected before any date.")
    return Reply(
        content=f"Perfect! Your appointment is booked for {date} at {time_slot}. 📅",
        components=[
            Card(
                title="Booking Confirmed",
                content=(
                    f"Date: {date}\nTime: {time_slot}\n\n"
                    "We'll send you a reminder 24 hours before your appointment."
                ),
                actions=[
                    CardAction(label="Add to Calendar", action="add_calendar"),
                    CardAction(label="Book Another", action="book_another"),
                ],
            )
        ],
        context=spread_nested(context, BOOKING_KEY, time=time_slot, confirmed=True),
    )


# ---------------------------
# Feedback
# ---------------------------


def submit_rating(action: str, payload: Any, context: Context) -> Reply:
    """Thank the user with one star per rating point (no clamping)."""
    stars = STAR_GLYPH * ValuePayload.read(action, payload).as_int()
    return Reply(
        content=f"Thank you for rating us {stars}! Your feedback helps us improve.",
        context=context,
    )


def submit_comment(action: str, payload: Any, context: Context) -> Reply:
    """Thank the user for a free-text comment."""
    comment = ValuePayload.read(action, payload).as_text()
    return Reply(
        content=(
            f'Thanks for your comment: "{comment}".'
            " We appreciate your detailed feedback!"
        ),
        context=context,
    )


# ---------------------------
# Plans
# ---------------------------


def learn_more(action: str, payload: Any, context: Context) -> Reply:
    """Describe the Premium or Basic plan and offer to buy it."""
    plan = "Premium" if "premium" in action else "Basic"
    return Reply(
        content=f"Here are more details about the {plan} plan:",
        components=[
            ItemList(items=list(_PLAN_FEATURES[plan])),
            Button(
                label=f"Buy {plan} Plan",
                action=f"buy_{plan.lower()}",
                variant="primary",
            ),
        ],
        context=context,
    )


def buy_plan(action: str, payload: Any, context: Context) -> Reply:
    """Start checkout for whatever plan follows the ``buy_`` prefix."""
    plan = action.replace("buy_", "", 1)
    return Reply(
        content=f"Redirecting to checkout for the {plan} plan...",
        components=[
            Card(
                title="Purchase Initiated",
                content=(
                    "Please complete the payment process to activate"
                    " your subscription."
                ),
            )
        ],
        context=context,
    )


ACTION_HANDLERS: Dict[str, ActionHandler] = {
    "submit_signup": submit_signup,
    "show_table": show_table,
    "show_chart": show_chart,
    "show_form": show_form,
    "set_num1": set_num1,
    "set_num2": set_num2,
    "calculate_add": calculate_add,
    "calculate_multiply": calculate_multiply,
    "select_date": select_date,
    "select_time": select_time,
    "submit_rating": submit_rating,
    "submit_comment": submit_comment,
    "learn_more_premium": learn_more,
    "learn_more_basic": learn_more,
}

# Checked in order after an exact-match miss.
PREFIX_RULES: List[Tuple[str, ActionHandler]] = [
    ("buy_", buy_plan),
]
