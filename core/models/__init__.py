# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas:
# - content.py: Page copy returned by the content backend
# - contact.py: Contact form state and submission status
# - page.py: Fully resolved page view consumed by templates
# =============================================================================

# -----------------------------------------------------------------------------
# Content Models - Backend-supplied page copy
# -----------------------------------------------------------------------------
from .content import (
    ContentModel,
    ContentSection,
    HeroContent,
    NavLink,
)

# -----------------------------------------------------------------------------
# Contact Models - Contact form
# -----------------------------------------------------------------------------
from .contact import (
    CONTACT_FIELDS,
    ContactFormState,
    ContactSubmission,
    SubmissionStatus,
)

# -----------------------------------------------------------------------------
# Page Models - Resolved view tree
# -----------------------------------------------------------------------------
from .page import (
    ContactView,
    FooterView,
    HeroView,
    PageView,
    SectionView,
)

__all__ = [
    # Content
    "ContentModel",
    "ContentSection",
    "HeroContent",
    "NavLink",
    # Contact
    "CONTACT_FIELDS",
    "ContactFormState",
    "ContactSubmission",
    "SubmissionStatus",
    # Page
    "ContactView",
    "FooterView",
    "HeroView",
    "PageView",
    "SectionView",
]
