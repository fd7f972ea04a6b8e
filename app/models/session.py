from pydantic import BaseModel


class SessionData(BaseModel):
    """Server-side binding of a session id to the last successful login."""

    token: str
    username: str
