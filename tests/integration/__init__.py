"""Integration tests for components working together as a system.

Coverage:
    - Submit, encode, build, send and resolve through a fake Gemini endpoint
    - Host application routes with real HTTP requests
    - Live Gemini call (when GOOGLE_API_KEY is configured)
"""
