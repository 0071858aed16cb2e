from .entity import Customer
from .repository import CustomerRepository
from .value_object import Email, PersonName

__all__ = ["Customer", "CustomerRepository", "Email", "PersonName"]
