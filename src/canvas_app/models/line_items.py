from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field


def _new_id() -> str:
    return str(uuid4())


class Equipment(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    unit_value: float = 0.0
    quantity: int = 1
    lifespan: int = Field(60, description="Useful life in months")


class Personnel(BaseModel):
    id: str = Field(default_factory=_new_id)
    role: str = ""
    monthly_salary: float = 0.0
    count: int = 1


class Activity(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    unit_value: float = 0.0
    monthly_count: float = 0.0


class Product(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    price: float = 0.0
    monthly_quantity: float = 0.0


class CustomerSegment(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    monthly_target: int = Field(0, description="Informational only, not used in the financial math")


class OtherCharge(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    monthly_value: float = 0.0


class RawMaterial(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    monthly_value: float = 0.0
