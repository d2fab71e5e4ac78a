"""WebSocket to length-framed TCP bridge."""

__version__ = "0.1.0"
