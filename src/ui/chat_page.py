"""NiceGUI chat interface for the digital twin."""

from nicegui import ui

from src.client.config import get_chat_config
from src.client.twin_client import TwinClient
from src.models.schemas import Message, Role
from src.ui.formatting import AVATAR_URL, avatar_available, format_timestamp
from src.ui.session import ChatSession

TOPIC_BADGES = [
    ("AI/ML Expert", "bg-indigo-100 text-indigo-700"),
    ("Course Assistant", "bg-purple-100 text-purple-700"),
    ("24/7 Available", "bg-cyan-100 text-cyan-700"),
]

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: linear-gradient(135deg, #eef2ff 0%, #ffffff 50%, #ecfeff 100%); }

    .app-container {
        background: white;
        border-radius: 16px;
        border: 1px solid #e5e7eb;
        box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.25);
        overflow: hidden;
    }

    .header { background: linear-gradient(90deg, #4f46e5 0%, #9333ea 50%, #0891b2 100%); }

    .message-user {
        background: linear-gradient(90deg, #4f46e5 0%, #9333ea 100%);
        color: white;
        border-radius: 16px;
    }

    .message-assistant {
        background: white;
        color: #1f2937;
        border: 1px solid #e5e7eb;
        border-radius: 16px;
        box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
    }

    .avatar-user { background: linear-gradient(90deg, #4b5563 0%, #374151 100%); }
    .avatar-assistant { background: linear-gradient(90deg, #6366f1 0%, #9333ea 100%); }

    .typing-dot {
        width: 12px; height: 12px;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(1) { background: #818cf8; }
    .typing-dot:nth-child(2) { background: #c084fc; animation-delay: 0.1s; }
    .typing-dot:nth-child(3) { background: #22d3ee; animation-delay: 0.2s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        border: 1px solid #d1d5db;
        border-radius: 16px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #6366f1; }

    .send-btn { background: linear-gradient(90deg, #4f46e5 0%, #9333ea 100%) !important; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_chat_config()
    session = ChatSession(TwinClient(config))
    show_avatar_image = avatar_available(config.avatar_path)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button

    def render_assistant_avatar(size: str = "w-10 h-10") -> None:
        if show_avatar_image:
            ui.image(AVATAR_URL).classes(
                f"{size} rounded-full border-2 border-indigo-200 shadow-sm"
            )
            return
        with ui.element("div").classes(
            f"{size} rounded-full flex items-center justify-center shadow-md avatar-assistant"
        ):
            ui.icon("smart_toy").classes("text-white text-2xl")

    def render_user_avatar() -> None:
        with ui.element("div").classes(
            "w-10 h-10 rounded-full flex items-center justify-center shadow-md avatar-user"
        ):
            ui.icon("person").classes("text-white text-2xl")

    def render_welcome() -> None:
        with ui.column().classes("w-full items-center gap-2 mt-12 text-center"):
            with ui.element("div").classes(
                "w-24 h-24 rounded-full flex items-center justify-center shadow-lg "
                "avatar-assistant mb-4"
            ):
                if show_avatar_image:
                    ui.image(AVATAR_URL).classes(
                        "w-20 h-20 rounded-full border-4 border-white shadow-md"
                    )
                else:
                    ui.icon("smart_toy").classes("text-white text-5xl")
            ui.label(f"Welcome to {config.assistant_name}!").classes(
                "text-2xl font-bold text-gray-800"
            )
            ui.label("I'm your AI-powered companion").classes("text-lg text-gray-600 mb-2")
            with ui.row().classes("justify-center gap-2"):
                for text, colors in TOPIC_BADGES:
                    ui.label(text).classes(f"px-3 py-1 rounded-full text-sm {colors}")

    def render_message(msg: Message) -> None:
        is_user = msg.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"
        time_color = "text-indigo-100" if is_user else "text-gray-500"

        with ui.row().classes(f"w-full {align} gap-4 no-wrap"):
            if not is_user:
                render_assistant_avatar()
            with ui.element("div").classes(f"max-w-[75%] p-4 {bubble}"):
                ui.label(msg.content).classes("whitespace-pre-wrap leading-relaxed")
                ui.label(format_timestamp(msg.timestamp)).classes(f"text-xs mt-2 {time_color}")
            if is_user:
                render_user_avatar()

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-4 no-wrap"):
            render_assistant_avatar()
            with ui.element("div").classes("message-assistant p-4"):
                with ui.row().classes("gap-2"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not session.messages:
                render_welcome()
            for msg in session.messages:
                render_message(msg)
            if session.is_loading:
                render_typing_indicator()

    def update_controls() -> None:
        state = session.controls(input_field.value)
        input_field.set_enabled(state.input_enabled)
        send_btn.set_enabled(state.send_enabled)

    def on_session_change() -> None:
        refresh_messages()
        update_controls()
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        if await session.submit(input_field.value or "", on_accept=clear_input):
            input_field.run_method("focus")

    def clear_input() -> None:
        input_field.value = ""

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-5xl mx-auto app-container gap-0").style(
            "height: 700px"
        ),
    ):
        # Header
        with ui.row().classes("w-full header p-6 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                with ui.element("div").classes(
                    "w-10 h-10 bg-white/20 rounded-full flex items-center justify-center"
                ):
                    ui.icon("smart_toy").classes("text-white text-2xl")
                with ui.column().classes("gap-0"):
                    ui.label(config.assistant_name).classes("text-xl font-bold text-white")
                    ui.label(config.tagline).classes("text-sm text-white/80")
            with ui.row().classes("items-center gap-3"):
                with ui.element("div").classes(
                    "bg-white/20 rounded-full px-3 py-1 flex items-center gap-2"
                ):
                    ui.icon("tag").classes("text-white/80 text-sm")
                    ui.label().bind_text_from(
                        session, "session_id", lambda s: s[:8].upper() if s else "NEW"
                    ).classes("text-xs text-white/80 font-mono")
                ui.button(icon="add", on_click=session.reset).props("flat round color=white")

        # Messages
        with ui.scroll_area().classes(
            "flex-grow w-full bg-gradient-to-b from-gray-50 to-white"
        ) as scroll_area, ui.column().classes("w-full p-6"):
            messages_container = ui.column().classes("w-full gap-6")

        # Input
        with ui.row().classes("w-full p-6 gap-3 items-center bg-white border-t no-wrap"):
            with ui.element("div").classes("flex-grow input-box px-4 py-1"):
                input_field = (
                    ui.input(
                        placeholder="Ask me anything about AI, ML, or your course...",
                        on_change=lambda _: update_controls(),
                    )
                    .props("borderless autofocus")
                    .classes("w-full")
                    .on("keydown.enter", send_message)
                )
            send_btn = (
                ui.button(icon="send", on_click=send_message)
                .props("round unelevated text-color=white")
                .classes("send-btn")
            )

    session.on_change = on_session_change
    refresh_messages()
    update_controls()
