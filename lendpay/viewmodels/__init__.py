"""ViewModel package for UI state and command surfaces.

Call context:
    ``lendpay/web_ui/main.py`` obtains concrete viewmodels from
    ``lendpay.app.controller.AppController`` and binds page widgets to them.

Dependencies:
    Modules in this package depend on domain types, use cases and lightweight
    formatting helpers only. I/O adapters remain outside.

Responsibilities:
    - Expose mutable form state and command callbacks for each view.
    - Reconcile optimistic form state against gateway outcomes.
    - Publish operator notifications through ``NotificationVM``.
"""
