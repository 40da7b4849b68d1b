"""
Shared fixtures: in-memory stand-ins for the Mongo repositories and a
TestClient with the cart/product dependencies overridden.
"""
import copy
import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.api.deps import get_cart_service, get_current_user, get_product_repository
from app.main import app
from app.services.cart_service import CartService
from app.utils.helpers import get_current_timestamp, parse_object_id


class InMemoryProductRepository:
    def __init__(self):
        self.products = {}

    def add(self, title: str, price: float, image: str = None) -> str:
        """Seed a product and return its id as a string."""
        now = get_current_timestamp()
        product_id = ObjectId()
        self.products[product_id] = {
            "_id": product_id,
            "title": title,
            "description": "",
            "price": price,
            "image": image,
            "category": None,
            "created_at": now,
            "updated_at": now,
        }
        return str(product_id)

    def set_price(self, product_id: str, price: float) -> None:
        self.products[ObjectId(product_id)]["price"] = price

    async def find_by_id(self, product_id):
        object_id = parse_object_id(product_id)
        if object_id is None or object_id not in self.products:
            return None
        return copy.deepcopy(self.products[object_id])

    async def list(self, skip=0, limit=50):
        return [copy.deepcopy(p) for p in list(self.products.values())[skip:skip + limit]]

    async def create(self, document):
        document["_id"] = ObjectId()
        self.products[document["_id"]] = copy.deepcopy(document)
        return document

    async def update(self, product_id, fields):
        object_id = parse_object_id(product_id)
        if object_id not in self.products:
            return None
        self.products[object_id].update(fields)
        return copy.deepcopy(self.products[object_id])

    async def delete(self, product_id):
        return self.products.pop(parse_object_id(product_id), None) is not None


class InMemoryCartRepository:
    def __init__(self):
        self.carts = {}
        self.save_calls = 0

    async def find_by_user(self, user_id):
        cart = self.carts.get(user_id)
        return copy.deepcopy(cart) if cart is not None else None

    async def create(self, document):
        document["_id"] = ObjectId()
        self.carts[document["user_id"]] = copy.deepcopy(document)
        return document

    async def save(self, cart):
        self.save_calls += 1
        stored = self.carts[cart["user_id"]]
        stored["items"] = copy.deepcopy(cart["items"])
        stored["total_price"] = cart["total_price"]
        stored["updated_at"] = cart["updated_at"]


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def cart_repo():
    return InMemoryCartRepository()


@pytest.fixture
def cart_service(cart_repo, product_repo):
    return CartService(cart_repo, product_repo)


@pytest.fixture
def current_user():
    return {"_id": ObjectId(), "email": "buyer@example.com", "role": "buyer"}


@pytest.fixture
def client(cart_service, product_repo, current_user):
    app.dependency_overrides[get_current_user] = lambda: current_user
    app.dependency_overrides[get_cart_service] = lambda: cart_service
    app.dependency_overrides[get_product_repository] = lambda: product_repo
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
