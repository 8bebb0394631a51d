"""
Domain layer module.

Key components:
- exceptions.py: Errors synthesized by the result combinators
- maybe.py: Optional-value companion type that results convert into
"""
