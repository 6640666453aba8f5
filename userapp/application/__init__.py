"""
Application Layer
=================

Application services and DTOs.
This layer orchestrates domain entities and repositories.
"""
