"""
Users database configuration.
Stores registered user records.
"""


class Collections:
    """Collection names in the users database."""
    USERS = "users"
