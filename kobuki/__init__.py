"""Payload wire formats, command data, events and helper modules for the Kobuki robot base."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "events",
    "info",
    "limiter",
    "modules",
    "parameters",
    "payload",
    "sensors",
    "version",
]