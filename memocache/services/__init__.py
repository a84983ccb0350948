"""
Service Layer
"""
