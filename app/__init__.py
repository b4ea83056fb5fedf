# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: App entry point, middleware, error handlers, startup fetch
# - config.py: Environment variable loading and settings
# - dependencies.py: Shared request dependencies
# - templating.py: Jinja2 setup for the landing page
# - routers/: Route definitions organized by feature
# - templates/, static/: Landing page markup and assets
#
# The app layer is thin - it handles HTTP concerns and delegates
# content and form logic to the core/ package.
# =============================================================================
