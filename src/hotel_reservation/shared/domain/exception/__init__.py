from .exceptions import (
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

__all__ = [
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "CustomerNotFoundException",
    "RoomNotFoundException",
    "BusinessRuleViolationException",
    "RoomUnavailableException",
    "DuplicateResourceException",
    "DuplicateCustomerEmailException",
]
