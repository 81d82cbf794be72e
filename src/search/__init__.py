"""Browse-time search and filtering layer.

This module ranks games by fuzzy text relevance, applies facet
predicates and pagination, and mirrors browse state in URL query strings.
"""
