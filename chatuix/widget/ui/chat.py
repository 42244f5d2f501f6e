"""Chat UI components."""

from typing import NamedTuple

import gradio as gr

from chatuix.widget.constants import CHAT_PLACEHOLDER, MAX_INPUT_LENGTH


class ChatUI(NamedTuple):
    """Named tuple for chat UI components."""

    container: gr.Group
    chatbot: gr.Chatbot
    textbox: gr.Textbox
    send_btn: gr.Button


def build_chat() -> ChatUI:
    """Build chat UI components."""
    with gr.Group() as group:
        chatbot = gr.Chatbot(
            type="messages",  # openai-style role/content dicts
            show_label=False,
            render_markdown=True,
            group_consecutive_messages=False,  # separate back2back
            autoscroll=True,
            height=520,
        )
        with gr.Row():
            textbox = gr.Textbox(
                placeholder=CHAT_PLACEHOLDER,
                show_label=False,
                max_length=MAX_INPUT_LENGTH,
                autofocus=True,
                scale=8,
            )
            send_btn = gr.Button("Send", variant="primary", scale=1)

    return ChatUI(container=group, chatbot=chatbot, textbox=textbox, send_btn=send_btn)
