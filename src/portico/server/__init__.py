"""ASGI bridge between an external server and the dispatcher."""
