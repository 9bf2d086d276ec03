from pydantic import BaseModel, ConfigDict, Field


def make_key(category: str, brand: str) -> str:
    """Composite key for a (category, brand) pair, case-insensitive."""
    return f"{category.lower()}:{brand.lower()}"


class Item(BaseModel):
    model_config = ConfigDict(validate_assignment=True) # Keeps quantity >= 0 on updates

    category: str
    brand: str
    price: int = Field(gt=0) # Fixed at registration
    quantity: int = Field(default=0, ge=0)

    @property
    def key(self) -> str:
        return make_key(self.category, self.brand)

    def __str__(self):
        return f"Brand: {self.brand}, category: {self.category}, Price: {self.price}, Quantity: {self.quantity}"

    def __repr__(self):
        return f"<Item(key='{self.key}', price={self.price}, quantity={self.quantity})>"
