"""Request and response models for the login flow."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.user import User


class LoginRequest(BaseModel):
    """Body of ``POST /login``.

    Only the type is checked here; the UUID shape is checked by the
    identity service so that a malformed id yields the same 400 message
    no matter how the service is called.
    """
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")


class LoginResponse(BaseModel):
    """Signed access token together with the identity it was issued for."""
    token: str
    user: User
