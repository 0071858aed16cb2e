from __future__ import annotations

from pydantic import BaseModel

from hotel_reservation.customer.domain.entity import Customer


class CustomerData(BaseModel):
    """顧客データのレスポンスモデル"""

    email: str
    first_name: str
    last_name: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: CustomerData


def to_customer_data(customer: Customer) -> CustomerData:
    return CustomerData(
        email=str(customer.email),
        first_name=str(customer.first_name),
        last_name=str(customer.last_name),
    )


def to_response(customer: Customer) -> dict:
    """Customer エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_customer_data(customer)).model_dump()
