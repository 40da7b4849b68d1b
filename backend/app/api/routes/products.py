from typing import List
from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_user, get_current_admin, get_product_repository
from app.core.exceptions import NotFoundError, ValidationError
from app.models.product import Product
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from app.utils.helpers import format_document, get_current_timestamp, parse_object_id

router = APIRouter()


def _to_response(product: dict) -> ProductResponse:
    return ProductResponse.model_validate(format_document(dict(product)))


async def _get_existing(product_id: str, products: ProductRepository) -> dict:
    if parse_object_id(product_id) is None:
        raise ValidationError("Invalid product ID")

    product = await products.find_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@router.get("", response_model=List[ProductResponse])
async def get_products(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    current_user: dict = Depends(get_current_user),
    products: ProductRepository = Depends(get_product_repository)
):
    """Get list of products."""
    return [_to_response(product) for product in await products.list(skip, limit)]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    products: ProductRepository = Depends(get_product_repository)
):
    """Get a single product by ID."""
    return _to_response(await _get_existing(product_id, products))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    current_user: dict = Depends(get_current_admin),
    products: ProductRepository = Depends(get_product_repository)
):
    """Create a new product (admins only)."""
    document = Product(**product.model_dump()).to_document()
    created = await products.create(document)
    return _to_response(created)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    product_update: ProductUpdate,
    current_user: dict = Depends(get_current_admin),
    products: ProductRepository = Depends(get_product_repository)
):
    """
    Update a product (admins only).

    Only the fields present in the body are changed. Carts holding the
    product pick up a new price on their next mutation.
    """
    await _get_existing(product_id, products)

    update_data = product_update.model_dump(exclude_unset=True, exclude_none=True)
    update_data["updated_at"] = get_current_timestamp()

    updated = await products.update(product_id, update_data)
    if updated is None:
        raise NotFoundError("Product not found")
    return _to_response(updated)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    current_user: dict = Depends(get_current_admin),
    products: ProductRepository = Depends(get_product_repository)
):
    """
    Delete a product (admins only).

    Cart lines referencing it are left in place and drop out of totals.
    """
    await _get_existing(product_id, products)
    await products.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
