"""Services Layer — imperative shell around the registry core.

Invariants:
    - Services translate typed core errors into boolean outcomes
    - All logging happens here, never in core/

Design Decisions:
    - One owned service instance per application (no module-level registry)
"""
