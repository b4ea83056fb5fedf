# =============================================================================
# core/services/page_renderer.py - Landing Page Composition
# =============================================================================
# Turns the (optional) ContentModel into a fully resolved PageView.
#
# Each display field has a fallback chain: an ordered list of accessors
# tried left to right, then a static default. The first truthy value wins.
# Accessors never raise on missing data, so rendering never fails however
# little content the backend supplied.
# =============================================================================

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from core.models.contact import ContactFormState, SubmissionStatus
from core.models.content import ContentModel, NavLink
from core.models.page import (
    ContactView,
    FooterView,
    HeroView,
    PageView,
    SectionView,
)

Accessor = Callable[[ContentModel], str | None]


# =============================================================================
# Static Copy
# =============================================================================

SITE_NAME = "Qarakal"

DEFAULT_NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(label="About", href="#about"),
    NavLink(label="Research", href="#research"),
    NavLink(label="Careers", href="#careers"),
)

DEFAULT_HERO_HEADING = "Quantitative Computing for the Frontier"
DEFAULT_HERO_SUBHEADING = "We build high-performance AI and systems for capital and computation."
DEFAULT_ABOUT_TITLE = "About"

CAREERS_TITLE = "Careers"
CAREERS_BODY = (
    "We’re always looking for exceptional builders across research, engineering, "
    "and systems. If you love hard problems and elegant systems, reach out."
)

SEND_LABEL = "Send message"
SENDING_LABEL = "Sending..."
SENT_MESSAGE = "Thanks — we’ll be in touch soon."
ERROR_MESSAGE = "Something went wrong. Please try again."

# sections[0] is the About block; these follow it
EXTRA_SECTION_SLICE = slice(1, 4)


# =============================================================================
# Fallback Chains
# =============================================================================

@dataclass(frozen=True)
class FallbackChain:
    """
    Ordered sources for one display field.

    Example:
        chain = FallbackChain((_hero_heading, _title), "Welcome")
        chain.resolve(None)  # "Welcome"
    """

    accessors: tuple[Accessor, ...]
    default: str | None = None

    def resolve(self, content: ContentModel | None) -> str | None:
        if content is not None:
            for accessor in self.accessors:
                value = accessor(content)
                if value:
                    return value
        return self.default


def _hero_heading(content: ContentModel) -> str | None:
    return content.hero.heading if content.hero else None


def _hero_subheading(content: ContentModel) -> str | None:
    return content.hero.subheading if content.hero else None


def _title(content: ContentModel) -> str | None:
    return content.title


def _description(content: ContentModel) -> str | None:
    return content.description


def _section_field(index: int, field: str) -> Accessor:
    def accessor(content: ContentModel) -> str | None:
        section = content.section(index)
        return getattr(section, field) if section is not None else None
    return accessor


HERO_HEADING = FallbackChain((_hero_heading, _title), DEFAULT_HERO_HEADING)
HERO_SUBHEADING = FallbackChain((_hero_subheading, _description), DEFAULT_HERO_SUBHEADING)
ABOUT_TITLE = FallbackChain((_section_field(0, "title"),), DEFAULT_ABOUT_TITLE)
ABOUT_BODY = FallbackChain((_section_field(0, "body"),))


# =============================================================================
# Resolution
# =============================================================================

def resolve_nav_links(content: ContentModel | None) -> list[NavLink]:
    """Backend nav entries if there are any, else the three defaults."""
    if content is not None and content.nav:
        return list(content.nav)
    return list(DEFAULT_NAV_LINKS)


def resolve_sections(content: ContentModel | None) -> list[SectionView]:
    """Up to three sections after the About block, skipping empty ones."""
    if content is None or not content.sections:
        return []

    views = []
    for section in content.sections[EXTRA_SECTION_SLICE]:
        if section is None or section.is_empty:
            continue
        views.append(SectionView(title=section.title, body=section.body))
    return views


def build_contact_view(
    form: ContactFormState | None = None,
    status: SubmissionStatus = SubmissionStatus.IDLE,
) -> ContactView:
    """Contact form with the button state and message for `status`."""
    sending = status == SubmissionStatus.SENDING
    return ContactView(
        form=form or ContactFormState(),
        status=status,
        button_label=SENDING_LABEL if sending else SEND_LABEL,
        button_disabled=sending,
        success_message=SENT_MESSAGE if status == SubmissionStatus.SENT else None,
        error_message=ERROR_MESSAGE if status == SubmissionStatus.ERROR else None,
    )


def render_page(
    content: ContentModel | None,
    contact: ContactView | None = None,
    *,
    year: int | None = None,
    site_name: str = SITE_NAME,
) -> PageView:
    """
    Compose the landing page.

    Args:
        content: Backend page copy, or None when absent
        contact: Contact form view (defaults to an empty, idle form)
        year: Copyright year (defaults to the current year)
        site_name: Brand name for the nav and footer

    Returns:
        PageView with every field resolved
    """
    year = year or datetime.now().year

    return PageView(
        site_name=site_name,
        nav_links=resolve_nav_links(content),
        hero=HeroView(
            heading=HERO_HEADING.resolve(content),
            subheading=HERO_SUBHEADING.resolve(content),
        ),
        about=SectionView(
            anchor="about",
            title=ABOUT_TITLE.resolve(content),
            body=ABOUT_BODY.resolve(content),
        ),
        sections=resolve_sections(content),
        careers=SectionView(anchor="careers", title=CAREERS_TITLE, body=CAREERS_BODY),
        contact=contact or build_contact_view(),
        footer=FooterView(copyright=f"© {year} {site_name}. All rights reserved."),
    )
