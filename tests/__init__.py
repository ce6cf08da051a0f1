"""Test package for Gemini Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Full request cycle and host application tests

The Gemini endpoint is faked with httpx.MockTransport. Leverages pytest with
pytest-asyncio for coroutines and pytest-check for soft assertions.
"""
