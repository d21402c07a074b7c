from typing import Dict

from pydantic import BaseModel, ConfigDict


class PageModel(BaseModel):
    """One document read from the content directory."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    path: str  # relative to the content root, "/"-separated
    body: str  # raw content, metadata block stripped and variables substituted
    excerpt: str
    meta: Dict[str, str] = {}
    active: bool = False
