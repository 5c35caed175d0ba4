from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from shared.security.jwt import create_access_token


class TokenProvider(ABC):
    """Output port for issuing bearer access tokens."""

    @abstractmethod
    def create_access_token(
        self, data: Dict[str, Any], expires_minutes: Optional[int] = None
    ) -> str:
        pass


class JwtTokenProvider(TokenProvider):
    def __init__(self, secret_key: str, algorithm: str, expires_minutes: int):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def create_access_token(
        self, data: Dict[str, Any], expires_minutes: Optional[int] = None
    ) -> str:
        return create_access_token(
            data,
            secret_key=self.secret_key,
            algorithm=self.algorithm,
            expires_minutes=expires_minutes or self.expires_minutes,
        )
