"""Telegram exam helper: answers exam questions sent as text or photo."""

__version__ = "0.1.0"
