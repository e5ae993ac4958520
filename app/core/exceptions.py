"""Domain exceptions raised by stores and services.

Routers never build error payloads themselves; the handlers registered in
``app.main`` translate these into HTTP responses.
"""

from __future__ import annotations


class CandidateNotFoundError(Exception):
    """Raised when an operation targets a candidate id that does not exist."""

    def __init__(self, candidate_id: int) -> None:
        self.candidate_id = candidate_id
        super().__init__(f"Candidate not found: {candidate_id}")


class CandidateValidationError(Exception):
    """Raised when filter parameters or a payload fail validation.

    ``message`` is the short human-readable summary returned to clients,
    ``error`` carries the detailed reason.
    """

    def __init__(self, message: str, error: str) -> None:
        self.message = message
        self.error = error
        super().__init__(f"{message}: {error}")


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error dicts into one readable line.

    Transport prefixes (``body``, ``query``, ``path``) are dropped from the
    reported location.
    """
    parts: list[str] = []
    for err in errors:
        loc = ".".join(
            str(part)
            for part in err.get("loc", ())
            if part not in ("body", "query", "path")
        )
        msg = err.get("msg", "Invalid value")
        parts.append(f'{msg} at "{loc}"' if loc else msg)
    return "Validation error: " + "; ".join(parts)
