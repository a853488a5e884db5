"""Infrastructure Layer — database sessions and structured logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions mapped to SymbolicError before leaving this layer
"""
