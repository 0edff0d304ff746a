from abc import ABC, abstractmethod
from datetime import datetime

from src.domain.base import utcnow


class Clock(ABC):
    """Wall clock used for every expiry comparison"""

    @abstractmethod
    def now(self) -> datetime:
        pass


class SystemClock(Clock):
    def now(self) -> datetime:
        return utcnow()
