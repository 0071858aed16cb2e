from .email import Email
from .person_name import PersonName

__all__ = ["Email", "PersonName"]
