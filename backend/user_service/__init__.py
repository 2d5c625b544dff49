"""
User Service - registration and login backend over MongoDB.
"""

__version__ = "1.0.0"
