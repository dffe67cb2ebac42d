"""Frontmatter parsing and post construction from markdown files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from moyn.core.errors import ParseError
from moyn.core.models import Post

logger = logging.getLogger(__name__)

DELIMITER = "---"

EXPECTED_SHAPES = {
    "title": "a string",
    "published": "true or false",
    "tags": "a list of strings",
    "slug": "a string",
    "space": "a string",
}


class Frontmatter(BaseModel):
    """Recognized frontmatter keys. Anything else in the block is ignored."""

    model_config = ConfigDict(strict=True, extra="ignore")

    title: Optional[str] = None
    published: Optional[bool] = None
    tags: Optional[list[str]] = None
    slug: Optional[str] = None
    space: Optional[str] = None


@dataclass
class ParsedContent:
    frontmatter: Frontmatter = field(default_factory=Frontmatter)
    body: str = ""


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def parse_frontmatter(text: str) -> ParsedContent:
    """Split markdown into its frontmatter and body.

    A file whose first non-blank line is not ``---`` has no frontmatter and
    its whole content is the body. Raises ParseError for a block that is
    never closed, invalid YAML, or a recognized key with the wrong type.
    """
    lines = text.splitlines(keepends=True)

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    if start == len(lines) or not _is_delimiter(lines[start]):
        return ParsedContent(body=text)

    end = next(
        (i for i in range(start + 1, len(lines)) if _is_delimiter(lines[i])),
        None,
    )
    if end is None:
        raise ParseError("Frontmatter block opened with '---' but never closed")

    block = "".join(lines[start + 1:end])
    body = "".join(lines[end + 1:]).lstrip("\r\n")

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid frontmatter YAML: {e}") from e

    if data is None:
        return ParsedContent(body=body)
    if not isinstance(data, dict):
        raise ParseError("Frontmatter must be a mapping of keys to values")

    try:
        frontmatter = Frontmatter.model_validate(data)
    except PydanticValidationError as e:
        key = str(e.errors()[0]["loc"][0])
        raise ParseError(
            f"Invalid frontmatter: '{key}' must be {EXPECTED_SHAPES.get(key, 'valid')}"
        ) from e

    return ParsedContent(frontmatter=frontmatter, body=body)


def extract_title(body: str, filename: str) -> str:
    """First ``# `` heading in the body, else the filename without extension."""
    for line in body.splitlines():
        trimmed = line.strip()
        if trimmed.startswith("# "):
            heading = trimmed[2:].strip()
            if heading:
                return heading
    return Path(filename).stem or "Untitled"


def _unique(tags: list[str]) -> list[str]:
    seen: list[str] = []
    for tag in tags:
        if tag not in seen:
            seen.append(tag)
    return seen


def build_post(text: str, filename: str) -> Post:
    """Build a Post from raw markdown.

    Title precedence: frontmatter title, then the first heading, then the
    filename. Missing slug/space stay None, tags empty, published False.
    """
    parsed = parse_frontmatter(text)
    fm = parsed.frontmatter

    title = fm.title.strip() if fm.title and fm.title.strip() else None
    if title is None:
        title = extract_title(parsed.body, filename)

    return Post(
        title=title,
        body=parsed.body,
        published=bool(fm.published),
        tags=_unique(fm.tags or []),
        slug=fm.slug,
        space=fm.space,
    )


def load_post(path: Path) -> Post:
    """Read a markdown file from disk and build a Post from it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Could not read file {path}: {e}") from e

    logger.debug("Parsing %s (%d bytes)", path, len(text))
    return build_post(text, path.name)
