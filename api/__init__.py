"""
api/ - External API Layer
=========================
Clients for third-party HTTP APIs. Each client owns its HTTP session
and translates transport/status failures into BotError.
"""
