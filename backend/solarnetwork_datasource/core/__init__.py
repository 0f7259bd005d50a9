"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure; time is always passed in, never read

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
