import re
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Immutable settings threaded through every loader, tree and search call.

    Values passed to the constructor win; anything omitted is read from
    ``FLATDOCS_*`` environment variables (``FLATDOCS_CONTENT_DIR``,
    ``FLATDOCS_VARIABLES='{"company": "ACME"}'``, ...) before the defaults apply.
    """

    model_config = SettingsConfigDict(env_prefix="FLATDOCS_", frozen=True)

    content_dir: Path = Path("content")
    variables: Dict[str, str] = {}
    base_url: str = ""
    image_url: str = ""
    excerpt_length: int = Field(
        default=400,
        ge=0,
        description="Number of body characters kept in a page excerpt.",
    )
    excerpt_strip_markup: bool = Field(
        default=False,
        description="Remove HTML tags from the body before cutting the excerpt.",
    )
    search_context: int = Field(
        default=100,
        ge=0,
        description="Characters kept on each side of a search match.",
    )
    document_extensions: Tuple[str, ...] = (".md",)
    index_name: str = "index"
    ignore_pattern: Optional[str] = Field(
        default=None,
        description="Regular expression; matching file or directory names are skipped.",
    )
    keep_empty_categories: bool = True
    max_depth: int = Field(default=16, ge=1, le=64)

    @field_validator("document_extensions")
    @classmethod
    def _normalise_extensions(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value)

    @field_validator("ignore_pattern")
    @classmethod
    def _check_ignore_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"ignore_pattern is not a valid regular expression: {exc}")
        return value

    def substitution_variables(self) -> Dict[str, str]:
        """Return the variable set used for ``%name%`` replacement in page bodies."""
        merged = {"base_url": self.base_url, "image_url": self.image_url}
        merged.update(self.variables)
        return merged
