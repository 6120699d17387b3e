from .filtering import excluding, excluding_null, including
from .joining import joining
from .typed import typed

__all__ = (
    "excluding",
    "excluding_null",
    "including",
    "joining",
    "typed",
)
