"""Application composition layer for the web client.

Modules in this package hold startup configuration, wire adapters and use
cases into viewmodels, and own UI timers, without placing business logic in
views.
"""
