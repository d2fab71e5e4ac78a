from .runtime import RuntimeDeps
from .decoder import DecoderState
from .session import SessionPhase
from .settings import AppSettings
from .session_end import SessionEnd

__all__ = ["AppSettings", "DecoderState", "RuntimeDeps", "SessionEnd", "SessionPhase"]
