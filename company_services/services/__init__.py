"""Services Layer — the business layer: validation engine and per-entity pipelines.

Invariants:
    - One service per entity (department, employee, timecard)
    - Services reach storage only through the StorageGateway protocol
    - Every pipeline is fail-fast: the first error aborts before any write
"""
