from .get_customers import GetCustomersService
from .register_customer import RegisterCustomerService

__all__ = ["RegisterCustomerService", "GetCustomersService"]
