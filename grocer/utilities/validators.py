"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Any, List, Optional


class MealPlanInput(BaseModel):
    """Schema for meal plan creation.

    Entries stay raw values: entries that are not objects or reference unknown recipes are
    echoed back verbatim as invalid_entries.
    """
    start_date: Optional[str] = Field(None, validation_alias=AliasChoices('start_date', 'startDate'))
    entries: List[Any] = Field(default_factory=list)

    @field_validator('start_date')
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v


class CartItemInput(BaseModel):
    """Schema for a requested cart line."""
    sku: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(1, ge=1, le=1000)
    unit: Optional[str] = Field(None, max_length=20)
    category: Optional[str] = Field(None, max_length=50)

    @field_validator('sku')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()


class CartInput(BaseModel):
    """Schema for cart creation."""
    store_id: Optional[str] = Field(None, validation_alias=AliasChoices('store_id', 'storeId'))
    zipcode: Optional[str] = None
    items: List[CartItemInput] = Field(default_factory=list)


class AddItemsInput(BaseModel):
    """Schema for appending items to an existing cart."""
    items: List[CartItemInput] = Field(default_factory=list)


class CartFromPlanInput(BaseModel):
    """Schema for staging a cart from a meal plan."""
    store_id: Optional[str] = Field(None, validation_alias=AliasChoices('store_id', 'storeId'))
    zipcode: Optional[str] = None

    @field_validator('store_id', 'zipcode')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v
