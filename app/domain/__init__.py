"""
Domain layer containing core business logic and domain services.

Submodules:
- live: Live event streaming access.
"""
