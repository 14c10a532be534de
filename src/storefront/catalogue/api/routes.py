"""FastAPI endpoints for the Catalogue domain."""

import io

from fastapi import APIRouter, File, Query, UploadFile
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import (
    CategoryIdResponse,
    CategoryResponse,
    CreateCategoryRequest,
    ImageResponse,
    ProductIdResponse,
    ProductIdsRequest,
    ProductPageResponse,
    ProductRequest,
    ProductResponse,
    StatusResponse,
    UpdateCategoryRequest,
)
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import CreateCategory, DeleteCategory, UpdateCategory
from storefront.catalogue.category.queries import list_categories
from storefront.catalogue.images import get_image_store
from storefront.catalogue.product.creation import CreateProduct
from storefront.catalogue.product.details import ChangeProductImage, DeleteProduct, UpdateProduct
from storefront.catalogue.product.product import Product
from storefront.catalogue.product.search import (
    ProductSearchFilters,
    ProductSortOrder,
    get_products_by_ids,
    list_products,
    list_products_paged,
    search_products,
)
from storefront.shared.formatting import summarize
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


def _category_response(category, product_count=None) -> CategoryResponse:
    return CategoryResponse(
        category_id=str(category.id),
        name=category.name,
        description=category.description,
        product_count=product_count,
        created_at=str(category.created_at) if category.created_at else None,
    )


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        product_id=str(product.id),
        name=product.name,
        description=product.description,
        summary=summarize(product.description),
        price=product.price,
        stock=product.stock,
        in_stock=product.in_stock,
        image_url=product.image_url,
        category_id=str(product.category_id),
        units_sold=product.units_sold or 0,
        created_at=str(product.created_at) if product.created_at else None,
    )


def _page_response(result) -> ProductPageResponse:
    return ProductPageResponse(
        items=[_product_response(p) for p in result.items],
        total_count=result.total_count,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
        has_previous=result.has_previous,
        has_next=result.has_next,
    )


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def get_categories() -> list[CategoryResponse]:
    return [_category_response(category, count) for category, count in list_categories()]


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(name=body.name, description=body.description)
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    category = current_domain.repository_for(Category).get(category_id)
    return _category_response(category)


@category_router.put("/{category_id}", response_model=StatusResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> StatusResponse:
    command = UpdateCategory(category_id=category_id, name=body.name, description=body.description)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


# --- Product endpoints ---


@product_router.get("", response_model=ProductPageResponse)
async def search_catalogue(
    q: str | None = None,
    category_id: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    in_stock: bool = False,
    sort: ProductSortOrder = ProductSortOrder.NAME,
    page: int = 1,
    page_size: int = Query(0, description="Defaults to the storefront page size"),
) -> ProductPageResponse:
    """Storefront search: free text, category, price band and stock filters."""
    filters = ProductSearchFilters(
        term=q,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        in_stock_only=in_stock,
        sort=sort,
    )
    return _page_response(search_products(filters, page, page_size))


@product_router.get("/all", response_model=list[ProductResponse])
async def get_all_products() -> list[ProductResponse]:
    return [_product_response(p) for p in list_products()]


@product_router.get("/admin", response_model=ProductPageResponse)
async def get_products_for_admin(page: int = 1, page_size: int = 0) -> ProductPageResponse:
    return _page_response(list_products_paged(page, page_size))


@product_router.post("/by-ids", response_model=list[ProductResponse])
async def get_products_by_id_list(body: ProductIdsRequest) -> list[ProductResponse]:
    return [_product_response(p) for p in get_products_by_ids(body.product_ids)]


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(body: ProductRequest) -> ProductIdResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
        image_url=body.image_url,
        category_id=body.category_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: ProductRequest) -> StatusResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
        image_url=body.image_url,
        category_id=body.category_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str) -> StatusResponse:
    product = current_domain.repository_for(Product).get(product_id)
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)

    if product.image_url:
        get_image_store().delete_product_image(product.image_url)
    return StatusResponse()


@product_router.post("/{product_id}/image", status_code=201, response_model=ImageResponse)
async def upload_product_image(product_id: str, file: UploadFile = File(...)) -> ImageResponse:
    """Store an uploaded image and make it the product's picture."""
    product = current_domain.repository_for(Product).get(product_id)

    # The upload is already spooled; size it without reading it into memory.
    size = file.size
    if size is None:
        file.file.seek(0, io.SEEK_END)
        size = file.file.tell()
    file.file.seek(0)

    store = get_image_store()
    image_url = store.store_product_image(file.file, file.filename or "", size)
    if image_url is None:
        raise ValidationError({"file": ["Image must be a JPG, PNG or WEBP file of at most 5 MB"]})

    previous = product.image_url
    try:
        current_domain.process(ChangeProductImage(product_id=product_id, image_url=image_url), asynchronous=False)
    except Exception:
        store.delete_product_image(image_url)
        raise

    if previous and previous != image_url:
        store.delete_product_image(previous)

    logger.info("product_image_uploaded", product_id=product_id, image_url=image_url)
    return ImageResponse(product_id=product_id, image_url=image_url)
