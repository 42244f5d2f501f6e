"""Gradio chat widget for ChatUIX.

Renders the transcript in a chatbot, with tables, charts, cards and lists
drawn as markdown inside the assistant bubbles, and the interactive
components of the latest reply (buttons, inputs, forms, selects) drawn as
real controls under the chat.

NOTE: this is a minimal demo front end. A richer client should talk to the
HTTP API in `chatuix.api` instead.
"""
