from .connection import BackendConnection

__all__ = ["BackendConnection"]
