"""Services Layer — repository implementations over the async session.

Invariants:
    - Each repository receives its session explicitly (no module-level sessions)
    - Implementations satisfy the Protocols in core/repository_protocols.py
"""
