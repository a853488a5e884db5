"""Core Layer — symbolic errors, parameter sets, interception, dispatch.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO beyond logging

Design Decisions:
    - Transport reached only through core/protocols.py (request/response Protocols)
"""
