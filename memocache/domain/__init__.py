"""
Domain Layer

Backend-independent cache contracts.
"""
