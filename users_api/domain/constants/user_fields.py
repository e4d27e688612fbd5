"""Constants for User model field names and length rules"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    BIO = "bio"
    
    # Wire name of the bio field in responses
    BIOGRAPHY = "biography"


class UserLimits:
    """Inclusive character bounds (measured after trimming)"""
    NAME_MIN = 2
    NAME_MAX = 20
    BIO_MIN = 20
    BIO_MAX = 450
