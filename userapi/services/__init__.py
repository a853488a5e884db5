"""Services Layer — (req, res) handler collections registered with the dispatch context.

Invariants:
    - Each module exposes one explicit registry dict (USER_HANDLERS, AUTH_HANDLERS)
    - Handlers raise SymbolicError; they never format error JSON themselves
"""
