from pydantic import BaseModel, Field


class RegisterCustomerRequest(BaseModel):
    """顧客登録リクエストモデル"""

    email: str = Field(..., min_length=1, examples=["guest@example.com"])
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
