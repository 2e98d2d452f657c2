"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (validation and id parsing
      live here, store round trips live in infrastructure/)
"""
