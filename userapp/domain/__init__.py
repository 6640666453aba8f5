"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Domain entities (User)
- Repository Interfaces: Abstract contracts for data access
- Service Interfaces: Capabilities resolved from the container
"""
