"""Pydantic Schemas — request/response validation for the plugin endpoints.

Invariants:
    - Schemas validate at system boundary (host runtime payloads)
    - Field aliases mirror Grafana's camelCase wire names

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are domain values
"""
