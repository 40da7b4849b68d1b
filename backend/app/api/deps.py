from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.core.security import decode_access_token
from app.repositories.cart_repository import CartRepository
from app.repositories.product_repository import ProductRepository
from app.services.cart_service import CartService
from app.utils.helpers import parse_object_id

# Security scheme
security = HTTPBearer()


async def get_db(request: Request) -> AsyncIOMotorDatabase:
    """Dependency to get the database opened at startup."""
    return request.app.state.db


async def get_product_repository(
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> ProductRepository:
    return ProductRepository(db)


async def get_cart_repository(
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> CartRepository:
    return CartRepository(db)


async def get_cart_service(
    carts: CartRepository = Depends(get_cart_repository),
    products: ProductRepository = Depends(get_product_repository)
) -> CartService:
    return CartService(carts, products)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncIOMotorDatabase = Depends(get_db)
) -> dict:
    """
    Dependency to get the current authenticated user.

    Validates the JWT token and returns the user document from the database.

    Raises:
        HTTPException: If token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise credentials_exception

    user_id = payload.get("sub")
    if user_id is None:
        raise credentials_exception

    # Users may be keyed by ObjectId or by a plain string id
    object_id = parse_object_id(user_id)
    user = None
    if object_id is not None:
        user = await db.users.find_one({"_id": object_id})
    if user is None:
        user = await db.users.find_one({"_id": user_id})

    if user is None:
        raise credentials_exception

    return user


async def get_current_admin(
    current_user: dict = Depends(get_current_user)
) -> dict:
    """
    Dependency to ensure the current user is an admin.

    Raises:
        HTTPException: If user is not an admin
    """
    if current_user.get("role") != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admins can access this endpoint"
        )

    return current_user
