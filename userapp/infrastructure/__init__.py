"""
Infrastructure Layer
====================

MongoDB connection management and repository implementations.
"""
