from pydantic import BaseModel, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    username: str = Field(max_length=100)
    name: str = Field(default="", max_length=200)
    password: str = Field(max_length=256)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str
    password: str


class TokenResponse(BaseModel):
    """DTO for authentication token response

    `token` and `access_token` carry the same JWT; clients may read either.
    """
    token: str
    access_token: str
    token_type: str = "bearer"
    username: str
    name: str = ""
