from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from authsvc.domain.users.entities import AuthRequest, IssuedToken

# Only shape checks here; the length and format policy belongs to the use cases.
_MAX_FIELD_LENGTH = 1024


class RegisterRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = Field(max_length=_MAX_FIELD_LENGTH)
    email: str = Field(max_length=_MAX_FIELD_LENGTH)
    password: str = Field(max_length=_MAX_FIELD_LENGTH)

    def to_request(self) -> AuthRequest:
        return AuthRequest(username=self.username, password=self.password, email=self.email)


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str = Field(max_length=_MAX_FIELD_LENGTH)
    password: str = Field(max_length=_MAX_FIELD_LENGTH)

    def to_request(self) -> AuthRequest:
        return AuthRequest(username=self.username, password=self.password)


class AuthTokenDTO(BaseModel):
    status: Literal["success"] = "success"
    message: str
    token: str
    expires_at: datetime

    @classmethod
    def from_issued(cls, issued: IssuedToken, message: str) -> AuthTokenDTO:
        return cls(message=message, token=issued.token, expires_at=issued.expires_at)


class ProtectedResponseDTO(BaseModel):
    status: Literal["success"] = "success"
    user: str
