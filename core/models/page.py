# =============================================================================
# core/models/page.py - Resolved Page View Schemas
# =============================================================================
# The output of the page renderer: every display field already resolved
# against its fallback chain. Templates and the JSON API consume these
# without any further null checks.
# =============================================================================

from pydantic import BaseModel, Field

from .contact import ContactFormState, SubmissionStatus
from .content import NavLink


class HeroView(BaseModel):
    """Hero block."""
    heading: str
    subheading: str


class SectionView(BaseModel):
    """A rendered content section."""

    # Anchor id of the wrapping element (about, careers), if any
    anchor: str | None = None
    title: str | None = None
    body: str | None = None


class ContactView(BaseModel):
    """Contact form plus its submission feedback."""

    form: ContactFormState = Field(default_factory=ContactFormState)
    status: SubmissionStatus = SubmissionStatus.IDLE
    button_label: str
    button_disabled: bool

    # At most one of these is set
    success_message: str | None = None
    error_message: str | None = None


class FooterView(BaseModel):
    """Footer line."""
    copyright: str
    back_to_top_href: str = "#home"


class PageView(BaseModel):
    """
    The whole landing page, ready to render.

    Nav, hero, careers, contact and footer are always present. `about` is
    always present with at least a title. `sections` holds only non-empty
    blocks, in display order.
    """

    site_name: str
    nav_links: list[NavLink]
    hero: HeroView
    about: SectionView
    sections: list[SectionView] = Field(default_factory=list)
    careers: SectionView
    contact: ContactView
    footer: FooterView
