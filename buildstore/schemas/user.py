"""User request schemas and the shared message envelope."""

from pydantic import BaseModel, ConfigDict, Field

from buildstore.schemas.common import LaxStr


class Credentials(BaseModel):
    """Body of /signup and /login."""

    username: LaxStr = None
    password: LaxStr = None


class PasswordReset(BaseModel):
    """Body of /reset-password (camelCase keys on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    username: LaxStr = None
    old_password: LaxStr = Field(default=None, alias="oldPassword")
    new_password: LaxStr = Field(default=None, alias="newPassword")


class MessageResponse(BaseModel):
    message: str
