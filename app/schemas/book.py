from pydantic import BaseModel, Field


class BookResponse(BaseModel):
    author: str
    title: str
    reviews: dict[str, str] = Field(default_factory=dict)
