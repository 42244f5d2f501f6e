"""Gradio widget construction."""

from __future__ import annotations

import gradio as gr
from loguru import logger

from chatuix.core.session import ChatSession
from chatuix.widget.constants import MAX_TTL_SECONDS
from chatuix.widget.handlers import cleanup, on_load, on_user_message
from chatuix.widget.ui.chat import build_chat
from chatuix.widget.ui.controls import build_controls
from chatuix.widget.ui.header import build_header


def build_widget(banner: str | None = None) -> gr.Blocks:
    """Build the Gradio UI for chatting with ChatUIX."""
    logger.info("Building Gradio widget")

    widget = gr.Blocks(
        title="ChatUIX",
        theme=gr.themes.Default(primary_hue="violet"),
    )
    with widget:
        # One ChatSession per client, created on load
        state = gr.State(
            value=None,
            time_to_live=MAX_TTL_SECONDS,
            delete_callback=cleanup,  # function to call when state is deleted
        )

        build_header(banner)
        chat = build_chat()

        @gr.render(inputs=[state], triggers=[chat.chatbot.change])
        def _controls(session: ChatSession | None) -> None:
            if session is None:
                return
            build_controls(session.latest_components(), state, chat.chatbot)

        for trigger in (chat.textbox.submit, chat.send_btn.click):
            trigger(
                fn=on_user_message,
                inputs=[chat.textbox, state],
                outputs=[state, chat.chatbot, chat.textbox],
            )

        widget.load(on_load, inputs=[state], outputs=[state, chat.chatbot])

    return widget
