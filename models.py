from pydantic import BaseModel, Field, StrictStr
from typing import Optional, List


class CreateUserRequest(BaseModel):
    """Request model for creating a user."""
    name: StrictStr = Field(..., min_length=1, description="Display name of the user")


class User(BaseModel):
    """A user record as stored in the users table."""
    userId: str
    name: str


class UserListResponse(BaseModel):
    """Response model for listing users."""
    users: List[str]


class UserCreatedResponse(BaseModel):
    """Response model for a created user."""
    message: str = "User added successfully"
    userId: str


class ErrorResponse(BaseModel):
    """Response model for a failed request."""
    message: str
    error: Optional[str] = None
