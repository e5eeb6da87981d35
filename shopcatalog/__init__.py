"""Shop Catalog API.

Product catalog service: products with owned image sets, lookup by id,
title or slug, paginated listing, atomic updates and seeding.
"""

__version__ = "0.1.0"
