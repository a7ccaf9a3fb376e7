"""NiceGUI chat page backed by the conversation controller and session gate."""

from nicegui import events, ui

from src.client.api_client import ChatApiClient
from src.conversation.controller import SUBMIT_KEY, ConversationController
from src.models.schemas import ConversationSnapshot, Message
from src.session.gate import SessionGate

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
        position: relative;
    }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-bot {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
        white-space: pre-wrap;
    }

    .avatar-user { background: #2563eb; }
    .avatar-bot { background: #6b7280; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .session-overlay { background: rgba(17, 24, 39, 0.75); z-index: 50; }
</style>
"""


# Plain Enter only; Shift+Enter falls through to the textarea
SUBMIT_EVENT = "keydown.enter.exact.prevent"


def render_chat_page(api: ChatApiClient) -> None:
    """Build the chat UI for one page visit.

    Args:
        api: Client for the chat backend shared by the gate and the controller.
    """
    ui.add_head_html(CUSTOM_CSS)
    gate = SessionGate(api)
    controller = ConversationController(api)
    rendered: tuple[Message, ...] = ()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.textarea
    send_btn: ui.button

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-bot"
        icon = "person" if is_user else "smart_toy"
        with ui.element("div").classes(
            f"w-9 h-9 rounded-full flex items-center justify-center {css}"
        ):
            ui.icon(icon).classes("text-white text-lg")

    def render_message(msg: Message) -> None:
        align = "justify-end" if msg.is_user else "justify-start"
        bubble = "message-user" if msg.is_user else "message-bot"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not msg.is_user:
                render_avatar(False)
            with ui.element("div").classes(f"max-w-[70%] px-4 py-3 {bubble}"):
                if msg.is_pending:
                    with ui.row().classes("gap-1 py-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                else:
                    ui.label(msg.text).classes("text-sm leading-relaxed")
            if msg.is_user:
                render_avatar(True)

    def on_snapshot(snapshot: ConversationSnapshot) -> None:
        nonlocal rendered
        if input_field.value != snapshot.input_text:
            input_field.value = snapshot.input_text
        input_field.set_enabled(not snapshot.disabled)
        send_btn.set_enabled(not snapshot.disabled)

        if snapshot.messages == rendered:
            return
        rendered = snapshot.messages
        messages_container.clear()
        with messages_container:
            for msg in snapshot.messages:
                render_message(msg)
        scroll_area.scroll_to(percent=1.0)

    async def on_enter() -> None:
        await controller.handle_keypress(SUBMIT_KEY)

    async def on_upload(e: events.UploadEventArguments) -> None:
        name = e.file.name
        content = await e.file.read()
        uploader.reset()
        ui.notify(f"File selected: {name}")
        await controller.upload_file(name, content)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Session overlay
        with (
            ui.element("div")
            .classes("session-overlay absolute inset-0 flex items-center justify-center")
            .mark("session-overlay")
            .bind_visibility_from(gate, "overlay_visible")
        ):
            ui.button(on_click=gate.start).props("unelevated size=lg").mark(
                "start-button"
            ).bind_text_from(gate, "button_label").bind_enabled_from(gate, "can_start")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            messages_container = ui.column().classes("w-full gap-4 p-5")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            uploader = ui.upload(on_upload=on_upload, auto_upload=True).classes("hidden")
            ui.button(
                icon="attach_file", on_click=lambda: uploader.run_method("pickFiles")
            ).props("flat round")
            input_field = (
                ui.textarea(
                    placeholder="메시지를 입력하세요...",
                    on_change=lambda e: controller.set_input(e.value or ""),
                )
                .props("autogrow borderless dense rows=1")
                .classes("flex-grow")
                .mark("message-input")
                .on(SUBMIT_EVENT, on_enter)
            )
            send_btn = (
                ui.button(icon="send", on_click=controller.submit_input)
                .props("round unelevated")
                .mark("send-button")
            )

    controller.subscribe(on_snapshot)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    render_chat_page(ChatApiClient())
