# shelf/models/book.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

class VolumeInfo(BaseModel):
    """One catalog match, as returned under items[].volumeInfo"""
    title: str
    published_date: Optional[str] = Field(None, alias='publishedDate')
    page_count: Optional[int] = Field(None, alias='pageCount')
    average_rating: Optional[float] = Field(None, alias='averageRating')
    language: Optional[str] = None
    description: Optional[str] = None
    authors: List[str] = []

    model_config = ConfigDict(populate_by_name=True)

class BookView(BaseModel):
    id: int
    title: str
    published_date: Optional[str] = None
    page_count: Optional[int] = None
    average_rating: Optional[float] = None
    language: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class AuthorView(BaseModel):
    id: int
    name: str
    surname: str

    model_config = ConfigDict(from_attributes=True)
