"""
Infrastructure Layer

Concrete cache stores and Redis connection management.
"""
