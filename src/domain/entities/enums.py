"""
Domain Enums
"""

from enum import Enum


class ResetTokenStorage(str, Enum):
    """Where admin password reset tokens are kept"""

    memory = "memory"
    database = "database"
