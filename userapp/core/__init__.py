"""
Core Package
============

Configuration, logging setup and the error taxonomy.
"""
