"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations of the Borrower Gateway port (HTTP and
    an in-memory double) used by use cases.

Dependencies:
    Submodules depend on ``requests``, ``pydantic`` schemas from the domain
    package, and domain protocol definitions.

Call context:
    Imported by ``lendpay.app.controller`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
