"""
Account-related Pydantic schemas
"""

from pydantic import BaseModel, Field

class AccountCreate(BaseModel):
    """Schema for registering an account"""
    name: str = Field(..., min_length=1, pattern=r"^[^/]+$")
    type: str

class AccountResponse(BaseModel):
    """Registered account"""
    name: str
    type: str
