"""YAML front matter parsing for markdown sources."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

import frontmatter
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from moss.exceptions import FrontmatterParsingError

logger = logging.getLogger(__name__)


class FrontMatter(BaseModel):
    """Recognized front matter keys; every field is optional."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str | None = None
    date: str | None = None
    topics: list[str] = Field(default_factory=list)
    weight: int | None = None
    github: str | None = None
    head_scripts: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> Any:
        # YAML turns unquoted 2025-01-15 into a date object.
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if value is None:
            return None
        return str(value)

    @field_validator("topics", mode="before")
    @classmethod
    def _normalize_topics(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list | tuple):
            return [str(topic).strip() for topic in value if topic is not None and str(topic).strip()]
        return value

    @field_validator("title", "github", "head_scripts", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, int | float | date):
            return str(value)
        return value


def parse_frontmatter(content: str, *, source: str = "<string>") -> tuple[FrontMatter, str]:
    """Split ``content`` into validated front matter and the markdown body.

    A missing front matter block yields an empty ``FrontMatter``.

    Raises:
        FrontmatterParsingError: If the YAML block is malformed or a value
            has the wrong type (for example a non-numeric ``weight``).

    """
    try:
        post = frontmatter.loads(content.lstrip("\ufeff"))
    except yaml.YAMLError as exc:
        raise FrontmatterParsingError(source, str(exc)) from exc

    try:
        metadata = FrontMatter.model_validate(dict(post.metadata))
    except ValidationError as exc:
        errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        raise FrontmatterParsingError(source, errors) from exc

    if not post.metadata:
        logger.debug("No front matter in %s", source)
    return metadata, post.content
