"""Response schemas validated before domain types are constructed."""

from pydantic import BaseModel, Field


class TitleItem(BaseModel):
    title: str = Field(description="An engaging YouTube title")


class TitlesResponse(BaseModel):
    titles: list[TitleItem] = Field(default_factory=list)


class KeywordsResponse(BaseModel):
    keywords: list[str] = Field(default_factory=list)


class StyleResponse(BaseModel):
    palette: list[str]
    typography: str
    layout: str
    effects: str
