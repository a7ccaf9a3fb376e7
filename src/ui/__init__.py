"""NiceGUI interface - thin visualization layer for the chat.

Responsibilities:
    - Session overlay bound to the session gate
    - Message bubbles rendered from conversation snapshots
    - Text input with Enter / Shift+Enter handling
    - Hidden file picker for .txt uploads

Contains no conversation logic. Delegates all operations to the controller.
"""
