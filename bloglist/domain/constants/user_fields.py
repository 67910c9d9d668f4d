"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    NAME = "name"
    HASHED_PASSWORD = "hashed_password"
    BLOG_IDS = "blogs"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
