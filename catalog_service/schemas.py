from pydantic import BaseModel, Field, conint
from typing import List

# Request body for registering an item
class ItemRegisterRequest(BaseModel):
    category: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    price: conint(gt=0) # Ensures price is integer > 0

# Request body for adding stock to a registered item
class StockAddRequest(BaseModel):
    category: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    quantity: conint(gt=0)

class ItemRead(BaseModel):
    category: str
    brand: str
    price: int
    quantity: int = Field(ge=0)

class SearchResponse(BaseModel):
    count: int
    items: List[ItemRead]

class ErrorResponse(BaseModel):
    detail: str
