"""Service layer: use-case orchestration on top of the user store.

Import concrete services from their modules (``greeter.services.user_service``)
so the store can depend on :mod:`greeter.services.errors` without cycles.
"""
