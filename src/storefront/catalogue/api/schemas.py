"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from storefront.constants import (
    MAX_CATEGORY_DESCRIPTION_LENGTH,
    MAX_CATEGORY_NAME_LENGTH,
    MAX_IMAGE_URL_LENGTH,
    MAX_PRODUCT_DESCRIPTION_LENGTH,
    MAX_PRODUCT_NAME_LENGTH,
)

# --- Request Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Hookahs", "description": "Complete hookah sets and spare parts"}]
        }
    }

    name: str = Field(..., max_length=MAX_CATEGORY_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_CATEGORY_DESCRIPTION_LENGTH)


class UpdateCategoryRequest(BaseModel):
    name: str = Field(..., max_length=MAX_CATEGORY_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_CATEGORY_DESCRIPTION_LENGTH)


class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Glass hookah 60cm",
                    "description": "Borosilicate glass base with a stainless steel stem.",
                    "price": 349.9,
                    "stock": 12,
                    "category_id": "3f1c2a2e-6c1e-4f0e-9a57-1d2b6a0c9e11",
                }
            ]
        }
    }

    name: str = Field(..., max_length=MAX_PRODUCT_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_PRODUCT_DESCRIPTION_LENGTH)
    price: float
    stock: int = 0
    image_url: str | None = Field(None, max_length=MAX_IMAGE_URL_LENGTH)
    category_id: str


class ProductIdsRequest(BaseModel):
    product_ids: list[str] = []


# --- Response Schemas ---


class StatusResponse(BaseModel):
    status: str = "ok"


class CategoryIdResponse(BaseModel):
    category_id: str


class ProductIdResponse(BaseModel):
    product_id: str


class ImageResponse(BaseModel):
    product_id: str
    image_url: str


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None
    product_count: int | None = None
    created_at: str | None = None


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    summary: str = ""
    price: float
    stock: int
    in_stock: bool
    image_url: str | None = None
    category_id: str
    units_sold: int = 0
    created_at: str | None = None


class ProductPageResponse(BaseModel):
    items: list[ProductResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_previous: bool
    has_next: bool
