"""Core Layer — pure registry and query logic, no IO, no logging, no config.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - Failures are raised as typed RegistryError subclasses, never swallowed

Design Decisions:
    - Functional core separated from imperative shell: the service facade
      owns logging and the boolean contract
"""
