"""
Account endpoints - signup, login and password reset.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from buildstore.api.dependencies import AuthServiceDep, parsed_body
from buildstore.schemas.user import Credentials, MessageResponse, PasswordReset

router = APIRouter()


@router.post("/signup", response_model=MessageResponse)
async def signup(svc: AuthServiceDep, data: Annotated[Credentials, Depends(parsed_body(Credentials))]):
    await svc.signup(data.username, data.password)
    return MessageResponse(message="User created successfully!")


@router.post("/login", response_model=MessageResponse)
async def login(svc: AuthServiceDep, data: Annotated[Credentials, Depends(parsed_body(Credentials))]):
    """Check credentials. No token is issued."""
    await svc.login(data.username, data.password)
    return MessageResponse(message="Login successful!")


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    svc: AuthServiceDep,
    data: Annotated[PasswordReset, Depends(parsed_body(PasswordReset))],
):
    await svc.reset_password(data.username, data.old_password, data.new_password)
    return MessageResponse(message="Password reset successfully!")
