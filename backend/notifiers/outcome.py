# backend/notifiers/outcome.py
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class DispatchOutcome:
    """Settled result of sending one message to one sink."""

    sink: str  # "slack" or "sns"
    ok: bool
    payload: Any = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, sink, payload=None):
        return cls(sink=sink, ok=True, payload=payload)

    @classmethod
    def failure(cls, sink, error):
        return cls(sink=sink, ok=False, error=error)

    @property
    def status_code(self):
        return getattr(self.error, "status_code", None)

    def to_dict(self):
        if self.ok:
            return {"sink": self.sink, "ok": True, "payload": self.payload}
        return {
            "sink": self.sink,
            "ok": False,
            "error": str(self.error),
            "status_code": self.status_code,
        }
