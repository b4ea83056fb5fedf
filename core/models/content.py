# =============================================================================
# core/models/content.py - Page Content Schemas
# =============================================================================
# These models describe the optional page copy returned by the content
# backend (GET /api/scrape):
# - HeroContent: hero heading/subheading
# - NavLink: one navigation entry
# - ContentSection: a titled block of body text
# - ContentModel: the whole payload
#
# Every field is optional and unknown fields are ignored. Parsing is
# tolerant per field: a malformed value becomes "absent" on its own and
# falls back to static copy at render time, without affecting any other
# field.
# =============================================================================

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


def coerce_text(value: Any) -> str | None:
    """
    Normalize a scalar from the payload to display text.

    Strings pass through, numbers are rendered as text, anything else
    (null, booleans, objects, arrays) counts as absent.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class HeroContent(BaseModel):
    """Hero block copy."""

    model_config = ConfigDict(extra="ignore")

    heading: str | None = None
    subheading: str | None = None

    @field_validator("heading", "subheading", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return coerce_text(value)


class NavLink(BaseModel):
    """
    A single navigation entry.

    Example:
        {"label": "Research", "href": "#research"}
    """

    model_config = ConfigDict(extra="ignore")

    label: str = Field(
        default="",
        description="Text shown in the navigation bar"
    )

    # Links without a target point at the top of the page
    href: str = Field(
        default="#",
        description="Link target (anchor or URL)"
    )

    @field_validator("label", mode="before")
    @classmethod
    def _label(cls, value: Any) -> str:
        return coerce_text(value) or ""

    @field_validator("href", mode="before")
    @classmethod
    def _href(cls, value: Any) -> str:
        return coerce_text(value) or "#"


class ContentSection(BaseModel):
    """A content block. Either field may be missing."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    body: str | None = None

    @field_validator("title", "body", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return coerce_text(value)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render."""
        return not self.title and not self.body


class ContentModel(BaseModel):
    """
    Page copy supplied by the content backend.

    Fetched once at startup and never mutated afterwards. Array order is
    display order.

    Example:
        {
            "title": "Qarakal",
            "description": "Quant systems",
            "hero": {"heading": "Compute the frontier"},
            "nav": [{"label": "About", "href": "#about"}],
            "sections": [{"title": "About", "body": "We build..."}]
        }
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str | None = None
    description: str | None = None
    hero: HeroContent | None = None
    nav: list[NavLink] | None = None

    # Non-object entries become None so later sections keep their position
    sections: list[ContentSection | None] | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return coerce_text(value)

    @field_validator("hero", mode="before")
    @classmethod
    def _hero(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, HeroContent)) else None

    @field_validator("nav", mode="before")
    @classmethod
    def _nav(cls, value: Any) -> Any:
        # Entries that aren't objects are dropped
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, (dict, NavLink))]

    @field_validator("sections", mode="before")
    @classmethod
    def _sections(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return None
        return [item if isinstance(item, (dict, ContentSection)) else None for item in value]

    def section(self, index: int) -> ContentSection | None:
        """Return the section at `index`, or None when it doesn't exist."""
        if not self.sections or index < 0 or index >= len(self.sections):
            return None
        return self.sections[index]

    @classmethod
    def from_payload(cls, data: Any) -> "ContentModel | None":
        """
        Parse a decoded JSON body permissively.

        Malformed fields are dropped one by one; only a payload that isn't a
        JSON object at all is rejected.

        Args:
            data: Whatever `response.json()` returned

        Returns:
            ContentModel, or None when the payload isn't an object
        """
        if not isinstance(data, dict):
            logger.warning(f"Content payload is {type(data).__name__}, expected object")
            return None

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Content payload failed validation: {e.error_count()} error(s)")
            return None
