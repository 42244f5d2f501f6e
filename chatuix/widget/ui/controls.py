"""Live controls for the interactive components of the latest reply.

Called from inside a ``gr.render`` block, so the controls are rebuilt every
time the transcript changes.
"""

from functools import partial
from typing import List

import gradio as gr
from loguru import logger

from chatuix.core.components import (
    Button,
    Card,
    Form,
    Input,
    Select,
    UIComponent,
    interactive_actions,
)
from chatuix.widget.handlers import on_action, on_form_action, on_value_action

_BUTTON_VARIANTS = {"primary": "primary", "secondary": "secondary", "danger": "stop"}

_TEXTBOX_TYPES = {"password": "password", "email": "email"}


def _button_control(component: Button, state: gr.State, chatbot: gr.Chatbot) -> None:
    variant = _BUTTON_VARIANTS.get(component.variant or "", "secondary")
    btn = gr.Button(component.label, variant=variant)
    btn.click(
        fn=partial(on_action, component.action),
        inputs=[state],
        outputs=[state, chatbot],
    )


def _card_controls(component: Card, state: gr.State, chatbot: gr.Chatbot) -> None:
    with gr.Row():
        for card_action in component.actions or []:
            btn = gr.Button(f"{component.title}: {card_action.label}", size="sm")
            btn.click(
                fn=partial(on_action, card_action.action),
                inputs=[state],
                outputs=[state, chatbot],
            )


def _input_control(component: Input, state: gr.State, chatbot: gr.Chatbot) -> None:
    with gr.Row():
        box = gr.Textbox(
            label=component.label,
            placeholder=component.placeholder or "",
            scale=4,
        )
        btn = gr.Button("Submit", scale=1)
    event = dict(
        fn=partial(on_value_action, component.action),
        inputs=[state, box],
        outputs=[state, chatbot],
    )
    box.submit(**event)
    btn.click(**event)


def _select_control(component: Select, state: gr.State, chatbot: gr.Chatbot) -> None:
    with gr.Row():
        dropdown = gr.Dropdown(
            choices=[(o.label, o.value) for o in component.options],
            label=component.label,
            scale=4,
        )
        btn = gr.Button("Submit", scale=1)
    btn.click(
        fn=partial(on_value_action, component.action),
        inputs=[state, dropdown],
        outputs=[state, chatbot],
    )


def _form_control(component: Form, state: gr.State, chatbot: gr.Chatbot) -> None:
    with gr.Group():
        boxes: List[gr.Textbox] = [
            gr.Textbox(
                label=field.label,
                placeholder=field.placeholder or "",
                type=_TEXTBOX_TYPES.get(field.type, "text"),
            )
            for field in component.fields
        ]
        btn = gr.Button(component.submit_label, variant="primary")
    names = [f.name for f in component.fields]
    btn.click(
        fn=partial(on_form_action, component.action, names),
        inputs=[state, *boxes],
        outputs=[state, chatbot],
    )


def build_controls(
    components: List[UIComponent], state: gr.State, chatbot: gr.Chatbot
) -> List[str]:
    """Draw a live control for each interactive component, in order.

    Returns:
        List[str]: The action ids that were wired up.
    """
    wired: List[str] = []
    for component in components:
        actions = interactive_actions(component)
        if not actions:
            continue  # display-only
        if isinstance(component, Button):
            _button_control(component, state, chatbot)
        elif isinstance(component, Card):
            _card_controls(component, state, chatbot)
        elif isinstance(component, Input):
            _input_control(component, state, chatbot)
        elif isinstance(component, Select):
            _select_control(component, state, chatbot)
        elif isinstance(component, Form):
            _form_control(component, state, chatbot)
        wired.extend(actions)
    logger.debug(f"Wired widget controls for {wired}")
    return wired
