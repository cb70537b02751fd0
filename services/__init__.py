"""
services/ - Business Logic Layer
================================
Command parsing, orchestration of API calls and reply formatting.
Services read incoming Telegram messages but never reply to them;
sending is left to the handlers.
"""
