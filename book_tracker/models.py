from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Book(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(gt=0)
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    year: int = Field(gt=1900)
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")


class CreateBook(BaseModel):
    # Required-ness is a business rule with its own message, so the schema only checks types.
    title: str | None = None
    author: str | None = None
    year: int | None = None


class UpdateBook(BaseModel):
    title: str | None = None
    author: str | None = None
    year: int | None = None
    completed: bool | None = None


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T | None = None
    message: str | None = None
