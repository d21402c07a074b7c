from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from flatdocs.models.page import PageModel


class CategoryModel(BaseModel):
    """One content directory: its own documents plus nested sub-directories."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    is_index: bool = False
    active: bool = False
    meta: Dict[str, str] = {}  # metadata of the directory's index document
    files: List[PageModel] = []
    categories: List["CategoryModel"] = []
