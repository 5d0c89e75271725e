"""Typed e-commerce entities produced by the entity generators.

Every entity exposes ``to_map()``, the projection exporters and the
relationship store consume. Orders and reviews carry the foreign keys
(``user_id``, ``product_id``, ``order_id``) used for joins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


class UserTier(str, Enum):
    POWER = "power"
    REGULAR = "regular"
    CASUAL = "casual"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class User:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    province: str
    postal_code: str
    gender: str
    birth_date: datetime
    behavior_type: str
    joined_date: datetime
    is_active: bool
    preferred_category: str
    tier: UserTier
    preferences: Mapping[str, Any] = field(default_factory=dict)

    def to_map(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
            "province": self.province,
            "postal_code": self.postal_code,
            "gender": self.gender,
            "birth_date": self.birth_date.isoformat(),
            "behavior_type": self.behavior_type,
            "joined_date": self.joined_date.isoformat(),
            "is_active": self.is_active,
            "preferred_category": self.preferred_category,
            "tier": self.tier.value,
            "preferences": dict(self.preferences),
        }


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category: str
    subcategory: str
    description: str
    price: float
    original_price: float
    brand: str
    sku: str
    stock: int
    rating: float
    review_count: int
    created_date: datetime
    is_active: bool
    images: tuple[str, ...] = ()

    def to_map(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "subcategory": self.subcategory,
            "description": self.description,
            "price": self.price,
            "original_price": self.original_price,
            "brand": self.brand,
            "sku": self.sku,
            "stock": self.stock,
            "rating": self.rating,
            "review_count": self.review_count,
            "images": list(self.images),
            "created_date": self.created_date.isoformat(),
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class Order:
    id: str
    user_id: str
    status: str
    total_amount: float
    shipping_cost: float
    discount_amount: float
    payment_method: str
    shipping_address: str
    order_date: datetime
    items: tuple[Product, ...]
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def product_ids(self) -> list[str]:
        return [item.id for item in self.items]

    def to_map(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "status": self.status,
            "total_amount": self.total_amount,
            "shipping_cost": self.shipping_cost,
            "discount_amount": self.discount_amount,
            "payment_method": self.payment_method,
            "shipping_address": self.shipping_address,
            "order_date": self.order_date.isoformat(),
            "items": [
                {"product_id": item.id, "name": item.name, "price": item.price}
                for item in self.items
            ],
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class Review:
    id: str
    user_id: str
    product_id: str
    order_id: str
    rating: int
    title: str
    comment: str
    is_verified_purchase: bool
    review_date: datetime
    helpful_count: int

    @property
    def has_comment(self) -> bool:
        return self.comment != ""

    def to_map(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "product_id": self.product_id,
            "order_id": self.order_id,
            "rating": self.rating,
            "title": self.title,
            "comment": self.comment,
            "is_verified_purchase": self.is_verified_purchase,
            "review_date": self.review_date.isoformat(),
            "helpful_count": self.helpful_count,
        }
