"""
Pydantic models for user data.

A user record carries only an identifier, a name and an e‑mail
address.  No format checks are applied to ``name`` or ``email``; both
default to an empty string when omitted from a request body.  Unknown
keys, including a client supplied ``id``, are ignored on input.
"""

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field("", examples=["Ann"])
    email: str = Field("", examples=["ann@example.com"])


class UserCreate(UserBase):
    """Schema for creating a user.  The identifier is assigned by the store."""


class UserUpdate(UserBase):
    """Schema for replacing the name and e‑mail of an existing user."""


class UserRead(UserBase):
    """Schema for a stored user, as returned by the API and written to disk."""

    id: int = Field(..., ge=0)

    model_config = {
        "from_attributes": True,
    }
