from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    # Optional so an incomplete body is reported by the service as a 400.
    email: Optional[str] = None
    password: Optional[str] = None
