"""
memocache Core

Configuration shared by stores and services.
"""
