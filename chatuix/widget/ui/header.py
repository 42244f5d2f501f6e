"""Header UI for the ChatUIX widget."""

from typing import NamedTuple

import gradio as gr


class HeaderUI(NamedTuple):
    """Named tuple for header UI components."""

    title: gr.Markdown


def build_header(banner: str | None = None) -> HeaderUI:
    """Build the header UI component."""
    if banner:
        gr.HTML(f'<div style="text-align:center" id="banner">{banner} </div>')
    title = gr.Markdown(
        """
        <div style='text-align:center'>
          <h1 style='margin-bottom:0'>ChatUIX</h1>
          <p style='margin-top:6px;color:#666'>Chat with inline interactive UI</p>
        </div>
        """
    )
    return HeaderUI(title=title)
