import enum
from decimal import Decimal

from pydantic import BaseModel, Field


class MenuCategory(str, enum.Enum):
    pizza = "pizza"
    salad = "salad"
    drink = "drink"
    dessert = "dessert"


class MenuItem(BaseModel):
    sku: str
    name: str
    price: Decimal = Field(ge=0)  # цена за единицу
    category: MenuCategory

    class Config:
        frozen = True
