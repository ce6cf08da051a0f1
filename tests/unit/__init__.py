"""Unit tests for individual components in isolation.

Coverage:
    - attachments/: Size and type validation, encoding
    - client/: Configuration, request building, response parsing, retry policy
    - chat/: Transcript state machine
    - ui/: Bubble formatting helpers
"""
