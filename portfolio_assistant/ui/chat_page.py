"""NiceGUI chat interface backed by a ChatSession."""

import logging

from nicegui import ui

from portfolio_assistant.conversation.session import ChatSession
from portfolio_assistant.conversation.store import StoreEvent
from portfolio_assistant.models.schemas import Message, Role
from portfolio_assistant.ui.presenters import (
    STARTER_PROMPTS,
    listen_for_page_lifetime,
    speaker_label,
    starter_prompts_visible,
    video_label,
)

logger = logging.getLogger(__name__)

PORTFOLIO_URL = "https://molindu-achintha.github.io/"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #0a0a0f; color: #f3f4f6; min-height: 100vh; }

    .brand-badge { background: linear-gradient(135deg, #8b5cf6 0%, #4f46e5 100%); }

    .message-user { background: rgba(139, 92, 246, 0.15); border-radius: 14px; }
    .message-assistant { background: transparent; }

    .typing-cursor { color: #2dd4bf; animation: blink 1s infinite; }
    @keyframes blink { 50% { opacity: 0; } }

    .starter-card {
        background: rgba(31, 41, 55, 0.5);
        border: 1px solid rgba(55, 65, 81, 0.5);
        border-radius: 12px;
        cursor: pointer;
        transition: border-color 0.2s;
    }
    .starter-card:hover { border-color: #8b5cf6; }

    .message-assistant a, .message-user a { color: #a78bfa; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession()
    controller = session.controller

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.textarea
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role is Role.USER
        bubble = "message-user" if is_user else "message-assistant"
        with ui.column().classes(f"w-full px-4 py-3 gap-2 {bubble}"):
            ui.label(speaker_label(msg)).classes(
                "text-xs font-bold text-gray-500 uppercase tracking-wider"
            )
            ui.markdown(msg.content).classes("text-sm leading-relaxed")
            if msg.videos:
                with ui.column().classes("gap-1"):
                    for i, video in enumerate(msg.videos):
                        ui.link(video_label(video, i), video.url, new_tab=True).classes(
                            "text-sm"
                        )
            if msg.suggestions:
                with ui.row().classes("gap-2 flex-wrap"):
                    for suggestion in msg.suggestions:
                        ui.button(
                            suggestion,
                            on_click=lambda s=suggestion: controller.select_suggestion(s),
                        ).props("outline rounded dense no-caps size=sm color=purple-4")

    def render_starters() -> None:
        with ui.row().classes("w-full gap-3 px-4 flex-wrap"):
            for prompt in STARTER_PROMPTS:
                with ui.element("div").classes("starter-card p-4 flex-1 min-w-[12rem]").on(
                    "click", lambda p=prompt: controller.select_suggestion(p)
                ):
                    ui.label(prompt).classes("text-sm text-gray-300")

    def render_typing_indicator() -> None:
        with ui.column().classes("w-full px-4 py-3 gap-1 message-assistant"):
            ui.label("Assistant").classes(
                "text-xs font-bold text-gray-500 uppercase tracking-wider"
            )
            ui.label("▋").classes("typing-cursor font-mono text-sm")

    def refresh_messages() -> None:
        messages = session.messages
        pending = session.is_pending
        messages_container.clear()
        with messages_container:
            for msg in messages:
                render_message(msg)
            if starter_prompts_visible(messages, pending):
                render_starters()
            if pending:
                render_typing_indicator()

    def refresh_input() -> None:
        if session.is_pending:
            input_field.disable()
            send_btn.disable()
        else:
            input_field.enable()
            send_btn.enable()

    def on_store_change(event: StoreEvent) -> None:
        refresh_messages()
        if event is StoreEvent.PENDING_CHANGED:
            refresh_input()
        scroll_area.scroll_to(percent=1.0)

    def send_message() -> None:
        if controller.submit(input_field.value or "") is not None:
            input_field.value = ""

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto h-screen gap-0"):
        # Header
        with ui.row().classes("w-full px-4 py-3 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                with ui.element("div").classes(
                    "w-9 h-9 rounded-xl brand-badge flex items-center justify-center"
                ):
                    ui.icon("auto_awesome").classes("text-white")
                with ui.column().classes("gap-0"):
                    ui.label("Molindu.ai").classes("text-lg font-semibold")
                    ui.label("Portfolio Assistant").classes("text-xs text-gray-500")
            ui.link("Classic View", PORTFOLIO_URL, new_tab=True).classes(
                "text-sm text-gray-300"
            )

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full gap-2 pb-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end"):
            input_field = (
                ui.textarea(placeholder="Ask about projects, skills, or experience...")
                .props("autogrow outlined dense rows=1 dark")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props(
                "round unelevated color=deep-purple"
            )

    refresh_messages()
    listen_for_page_lifetime(ui.context.client, session.store, on_store_change)
