"""
Domain error taxonomy.

Services raise these; the HTTP layer maps each class to a status code in
``skillexchange.main``.
"""

from typing import Dict, Optional


class SkillExchangeError(Exception):
    """Base class for every error raised by the service layer."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SkillExchangeError):
    """Bad input shape, enum value, length, or an illegal state transition."""

    status_code = 400

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors = errors or {}


class AuthenticationError(SkillExchangeError):
    status_code = 401


class AuthorizationError(SkillExchangeError):
    status_code = 403


class NotFoundError(SkillExchangeError):
    status_code = 404


class InternalError(SkillExchangeError):
    """Store failure surfaced to the caller as a generic error."""

    status_code = 500
