"""Infrastructure Layer — database lifecycle, migrations, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Store exceptions pass through unchanged; translation happens in the repository
"""
