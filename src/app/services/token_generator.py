"""
Random token generation.

All codes and tokens come from one injected generator so the alphabet and
length of each kind are fixed and tests can substitute predictable values.
"""

import secrets
import string
from abc import ABC, abstractmethod

UPPER_ALPHANUMERIC = string.ascii_uppercase + string.digits
LOWER_ALPHANUMERIC = string.ascii_lowercase + string.digits

CHECK_IN_CODE_PREFIX = "PET"
CHECK_IN_CODE_SUFFIX_LENGTH = 3
SIGNUP_CODE_LENGTH = 6
RESET_TOKEN_LENGTH = 32


class TokenGenerator(ABC):
    @abstractmethod
    def generate(self, length: int, alphabet: str) -> str:
        pass

    def check_in_code(self) -> str:
        return CHECK_IN_CODE_PREFIX + self.generate(
            CHECK_IN_CODE_SUFFIX_LENGTH, UPPER_ALPHANUMERIC
        )

    def signup_code(self) -> str:
        return self.generate(SIGNUP_CODE_LENGTH, UPPER_ALPHANUMERIC)

    def reset_token(self) -> str:
        return self.generate(RESET_TOKEN_LENGTH, LOWER_ALPHANUMERIC)


class SecureTokenGenerator(TokenGenerator):
    """Cryptographically secure generator backed by ``secrets``"""

    def generate(self, length: int, alphabet: str) -> str:
        if length <= 0:
            raise ValueError("length must be positive")
        return "".join(secrets.choice(alphabet) for _ in range(length))
