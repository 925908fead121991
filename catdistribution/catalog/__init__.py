"""
Catalog package for the Cat Distribution System.

The list screen is built as a pipeline of small stages: filtering by
search term and age, sorting by name or age, and pagination. A
controller composes the stages with the selection state and the
background generation driver, and the router exposes the result as a
REST API.
"""

from .router import router as catalog_router  # noqa: F401
