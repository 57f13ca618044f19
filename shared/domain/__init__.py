# Shared domain module
from .base_value_object import ValueObject
from .exceptions import DomainException, EntityNotFoundError, ValidationError

__all__ = [
    'ValueObject',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
]
