from .exceptions import (
    DomainException,
    InvalidArgumentException,
)

__all__ = [
    "DomainException",
    "InvalidArgumentException",
]
