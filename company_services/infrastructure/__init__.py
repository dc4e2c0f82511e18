"""Infrastructure Layer — database sessions, the SQLAlchemy storage gateway, logging.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - Every storage failure leaves this layer as StorageError
"""
