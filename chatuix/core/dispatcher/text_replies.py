"""Canned replies for free-text turns, in routing priority order."""

from __future__ import annotations

from typing import Callable, List, Tuple

from chatuix.core.components import (
    Button,
    Card,
    CardAction,
    Chart,
    ChartPoint,
    Form,
    FormField,
    Input,
    Select,
    SelectOption,
    Table,
)
from chatuix.core.dispatcher.conditions import TextPredicate, contains_any
from chatuix.core.dispatcher.reply import Reply
from chatuix.core.dispatcher.state import (
    BOOKING_KEY,
    CALCULATOR_KEY,
    FORM_TYPE_KEY,
    Context,
    with_keys,
)

TextHandler = Callable[[str, Context], Reply]


def signup_form(text: str, context: Context) -> Reply:
    """Offer the signup form."""
    return Reply(
        content=(
            "I've created a signup form for you."
            " Fill it out and I'll process your registration!"
        ),
        components=[
            Form(
                fields=[
                    FormField(
                        label="Full Name",
                        name="name",
                        type="text",
                        placeholder="John Doe",
                    ),
                    FormField(
                        label="Email",
                        name="email",
                        type="email",
                        placeholder="john@example.com",
                    ),
                    FormField(
                        label="Password",
                        name="password",
                        type="password",
                        placeholder="••••••••",
                    ),
                ],
                submit_label="Sign Up",
                action="submit_signup",
            )
        ],
        context=with_keys(context, **{FORM_TYPE_KEY: "signup"}),
    )


def sales_table(text: str, context: Context) -> Reply:
    """Show the quarterly sales table."""
    return Reply(
        content="Here's a sample sales data table showing our top products:",
        components=[
            Table(
                caption="Q4 2024 Sales Performance",
                headers=["Product", "Units Sold", "Revenue", "Growth"],
                rows=[
                    ["Product A", "1,234", "$45,678", "+15%"],
                    ["Product B", "987", "$32,450", "+8%"],
                    ["Product C", "1,567", "$67,890", "+23%"],
                    ["Product D", "654", "$21,234", "-5%"],
                    ["Product E", "2,345", "$89,012", "+45%"],
                ],
            )
        ],
        context=context,
    )


def revenue_chart(text: str, context: Context) -> Reply:
    """Show monthly revenue; ``pie`` or ``line`` in the text picks the chart type."""
    chart_type = "pie" if "pie" in text else "line" if "line" in text else "bar"
    return Reply(
        content=f"Here's a {chart_type} chart visualizing monthly revenue data:",
        components=[
            Chart(
                chart_type=chart_type,
                title="Monthly Revenue 2024",
                data=[
                    ChartPoint(name="Jan", value=4000),
                    ChartPoint(name="Feb", value=3000),
                    ChartPoint(name="Mar", value=5000),
                    ChartPoint(name="Apr", value=4500),
                    ChartPoint(name="May", value=6000),
                    ChartPoint(name="Jun", value=5500),
                ],
                x_key="name",
                y_key="value",
            )
        ],
        context=context,
    )


def product_cards(text: str, context: Context) -> Reply:
    """Show the two plan cards."""
    return Reply(
        content="Here are some product cards you might be interested in:",
        components=[
            Card(
                title="Premium Plan",
                content=(
                    "Get access to all features including advanced analytics,"
                    " priority support, and unlimited storage."
                ),
                actions=[
                    CardAction(label="Learn More", action="learn_more_premium"),
                    CardAction(label="Buy Now", action="buy_premium"),
                ],
            ),
            Card(
                title="Basic Plan",
                content=(
                    "Perfect for getting started with essential features"
                    " and 10GB storage."
                ),
                actions=[
                    CardAction(label="Learn More", action="learn_more_basic"),
                    CardAction(label="Buy Now", action="buy_basic"),
                ],
            ),
        ],
        context=context,
    )


def feedback_survey(text: str, context: Context) -> Reply:
    """Offer the rating select and a comment box."""
    return Reply(
        content="I'd love to hear your feedback! Please rate your experience:",
        components=[
            Select(
                label="How would you rate your experience?",
                options=[
                    SelectOption(value="5", label="⭐⭐⭐⭐⭐ Excellent"),
                    SelectOption(value="4", label="⭐⭐⭐⭐ Good"),
                    SelectOption(value="3", label="⭐⭐⭐ Average"),
                    SelectOption(value="2", label="⭐⭐ Poor"),
                    SelectOption(value="1", label="⭐ Very Poor"),
                ],
                action="submit_rating",
            ),
            Input(
                label="Additional Comments",
                placeholder="Tell us more...",
                input_type="text",
                action="submit_comment",
            ),
        ],
        context=context,
    )


def calculator(text: str, context: Context) -> Reply:
    """Start the calculator flow with empty operands."""
    return Reply(
        content="Here's a simple calculator. Enter numbers and I'll help you compute:",
        components=[
            Input(
                label="Enter first number",
                placeholder="0",
                input_type="number",
                action="set_num1",
            ),
            Input(
                label="Enter second number",
                placeholder="0",
                input_type="number",
                action="set_num2",
            ),
            Button(label="Add", action="calculate_add", variant="primary"),
            Button(label="Multiply", action="calculate_multiply", variant="secondary"),
        ],
        context=with_keys(context, **{CALCULATOR_KEY: {}}),
    )


def booking(text: str, context: Context) -> Reply:
    """Start the booking wizard at step 1 (date selection)."""
    return Reply(
        content="Let's book an appointment. First, select your preferred date:",
        components=[
            Select(
                label="Choose a date",
                options=[
                    SelectOption(value="2024-10-27", label="Monday, Oct 27"),
                    SelectOption(value="2024-10-28", label="Tuesday, Oct 28"),
                    SelectOption(value="2024-10-29", label="Wednesday, Oct 29"),
                    SelectOption(value="2024-10-30", label="Thursday, Oct 30"),
                    SelectOption(value="2024-10-31", label="Friday, Oct 31"),
                ],
                action="select_date",
            )
        ],
        context=with_keys(context, **{BOOKING_KEY: {"step": 1}}),
    )


def quick_actions(text: str, context: Context) -> Reply:
    """Default reply offering the three quick-action buttons."""
    return Reply(
        content=(
            "I can help you with various interactive UI elements!"
            " Here are some quick actions:"
        ),
        components=[
            Button(label="📋 Show Data Table", action="show_table", variant="primary"),
            Button(
                label="📊 Generate Chart", action="show_chart", variant="secondary"
            ),
            Button(label="📝 Create Form", action="show_form", variant="secondary"),
        ],
        context=context,
    )


# First match wins; order is significant.
TEXT_RULES: List[Tuple[TextPredicate, TextHandler]] = [
    (contains_any("form", "signup", "register"), signup_form),
    (contains_any("table", "data", "list"), sales_table),
    (contains_any("chart", "graph", "visualize"), revenue_chart),
    (contains_any("card", "product", "item"), product_cards),
    (contains_any("survey", "feedback", "rating"), feedback_survey),
    (contains_any("calculator", "calculate", "compute"), calculator),
    (contains_any("booking", "appointment", "schedule"), booking),
]

DEFAULT_TEXT_HANDLER: TextHandler = quick_actions
