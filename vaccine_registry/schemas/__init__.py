"""Pydantic Schemas — entity and query models shared by core and callers.

Invariants:
    - Every field is optional so bare instances can be built and rejected by the registry
    - Enum-valued fields hold opaque strings; unknown values are accepted

Design Decisions:
    - Pydantic over bare dataclasses: field coercion and deep equality for free
"""
