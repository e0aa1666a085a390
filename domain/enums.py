"""
Domain enums for the Recipes application.
"""

import enum


class Authority(str, enum.Enum):
    """Granted authorities stored on a user account"""

    USER = "ROLE_USER"


class SearchField(str, enum.Enum):
    """Recipe attributes the search endpoint can filter on"""

    CATEGORY = "category"
    NAME = "name"
