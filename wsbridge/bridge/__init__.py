from .factory import SessionFactory
from .session import SessionBridge

__all__ = ["SessionBridge", "SessionFactory"]
