"""
Domain enums for the NorthWind extension service.
"""

import enum


class EntitySet(str, enum.Enum):
    """Entity sets exposed by NorthWindService"""

    PRODUCTS = "Products"
    MIXIN_PRODUCTS = "MixinProducts"
    CUSTOM_PRODUCTS = "CustomProducts"
