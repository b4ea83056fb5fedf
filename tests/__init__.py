# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the landing site:
# - test_models.py: Pydantic model parsing and validation
# - test_page_renderer.py: Page composition and fallback chains
# - test_content_fetcher.py: Startup content fetch and content store
# - test_contact_submitter.py: Contact form submission lifecycle
# - test_config.py: Settings loading
# - test_pages.py: HTML and JSON routes
#
# Run tests with: pytest
# =============================================================================
