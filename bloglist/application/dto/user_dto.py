from typing import List

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    name: str = ""
    blogs: List[str] = Field(default_factory=list)


class OwnerSummary(BaseModel):
    """Redacted owner embedded in blog responses"""
    id: str
    username: str
    name: str = ""
