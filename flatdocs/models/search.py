from typing import List

from pydantic import BaseModel, ConfigDict


class SearchHit(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    excerpt: str
    """Raw text surrounding the first match; highlighting is up to the caller."""


class SearchResponse(BaseModel):
    query: str
    total: int
    results: List[SearchHit]
