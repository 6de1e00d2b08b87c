"""
Identity claims returned by the OpenID Connect userinfo endpoint.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Identity(BaseModel):
    """Verified user identity. Only ``subject`` is used as a key."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    subject: str = Field(..., alias="sub", min_length=1)
    email_verified: bool = False
    display_name: Optional[str] = Field(default=None, alias="name")
    preferred_username: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    email: Optional[str] = None
