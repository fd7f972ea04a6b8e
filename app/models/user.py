from pydantic import BaseModel


class User(BaseModel):
    username: str
    password: str  # stored as given, no hashing
