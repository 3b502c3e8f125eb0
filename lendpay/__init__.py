"""Operator client for a small lending platform.

Borrower registration, processor onboarding and fund disbursement, organised
as domain / adapters / usecases / viewmodels / app / web_ui layers.
"""

__version__ = "0.1.0"
