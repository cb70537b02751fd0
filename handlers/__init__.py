"""
handlers/ - Presentation Layer
==============================
Telegram command handlers. Each handler takes the incoming message,
passes it to a service, and sends the result (or the error text) back
to the chat. Handlers hold no state between updates.
"""
