"""Core Layer — entities, error taxonomy, pure field rules, boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Rule functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the ValidationEngine and
      services own every await
"""
