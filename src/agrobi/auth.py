"""Login gate for the dashboard.

There is no real authentication: any non-empty email and password pair is
accepted.
"""

from __future__ import annotations

from dataclasses import dataclass

MISSING_FIELDS_MESSAGE = "Por favor, preencha todos os campos."


@dataclass(frozen=True)
class AuthResult:
    ok: bool
    message: str = ""


def authenticate(email: str | None, password: str | None) -> AuthResult:
    if (email or "").strip() and (password or "").strip():
        return AuthResult(ok=True)
    return AuthResult(ok=False, message=MISSING_FIELDS_MESSAGE)
