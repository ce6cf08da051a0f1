"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display with user and bot bubbles
    - Single-file attachment picker with a removable chip
    - Typing indicator and disabled input while a reply is pending

Contains minimal business logic. Delegates state to gemini_chat.chat.
"""
