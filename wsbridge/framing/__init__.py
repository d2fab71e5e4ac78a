"""Length-prefixed framing between WebSocket messages and the backend byte stream."""

from .decoder import FrameDecoder
from .encoder import FrameEncoder

__all__ = ["FrameDecoder", "FrameEncoder"]
