# skillexchange/api/__init__.py
# This file makes the api directory a Python package.

from . import assessment
from . import auth
from . import dashboard
from . import exchange
from . import message
from . import skill

__all__ = [
    "auth",
    "skill",
    "assessment",
    "message",
    "exchange",
    "dashboard",
]
