from pydantic import BaseModel


class Credentials(BaseModel):
    # Optional so that missing fields map to a 400, not a validation error.
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    username: str
    token: str
