# item.py - Schemas Pydantic para InventoryItem

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

BUSINESS_FIELDS = ("name", "description", "quantity", "price", "category")
MAX_QUANTITY = 2**63 - 1


class ItemIn(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    # Límite de enteros de 8 bytes de BSON
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    price: float = Field(ge=0, allow_inf_nan=False)
    category: str = Field(min_length=1)


class ItemOut(ItemIn):
    # Nombres JSON iguales a los del documento almacenado
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class DeleteOut(BaseModel):
    message: str
    item: ItemOut


class HealthOut(BaseModel):
    status: str
    timestamp: str
    database: Optional[str] = None
