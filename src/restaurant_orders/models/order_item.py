from pydantic import BaseModel, Field


class OrderItem(BaseModel):
    sku: str
    qty: int = Field(gt=0)  # строка удаляется, как только qty доходит до нуля
