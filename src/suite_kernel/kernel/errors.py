from __future__ import annotations


class StructuralError(RuntimeError):
    # Raised when a test group itself is malformed; fatal for the whole run.
    pass
