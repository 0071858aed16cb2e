from .entity import Entity
from .exception import (
    BusinessRuleViolationException,
    CustomerNotFoundException,
    DomainException,
    DuplicateCustomerEmailException,
    DuplicateResourceException,
    ResourceNotFoundException,
    RoomNotFoundException,
    RoomUnavailableException,
    ValidationException,
)
from .repository import Repository
from .value_object import Currency, Money

__all__ = [
    "Entity",
    "Repository",
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "CustomerNotFoundException",
    "RoomNotFoundException",
    "BusinessRuleViolationException",
    "RoomUnavailableException",
    "DuplicateResourceException",
    "DuplicateCustomerEmailException",
    "Currency",
    "Money",
]
