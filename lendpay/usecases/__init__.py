"""Use-case layer for orchestrating operator workflows.

Each module coordinates domain objects and the Borrower Gateway port without
performing transport I/O directly, preserving MVVM + Hexagonal boundaries.
"""
