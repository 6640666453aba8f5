"""
userapp
=======

User management service: configuration, an explicit DI container and a
MongoDB-backed UserService, served by FastAPI.
"""
__version__ = "1.0.0"
