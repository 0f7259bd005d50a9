"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services read the clock and parse host payloads; core does neither
    - Services raise DatasourceError subclasses, never HTTP exceptions
"""
