"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
"""
