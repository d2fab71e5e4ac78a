"""Runtime package.

Keep this module dependency-light: importing ``wsbridge.runtime.*`` from unit
tests should not start a server or open sockets.
"""

__all__: list[str] = []
