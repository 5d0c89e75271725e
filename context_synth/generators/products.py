"""Product generation with category-specific names and tiered prices."""

from __future__ import annotations

from datetime import timedelta
from typing import Iterator, Optional, Sequence

from context_synth.core.context import GenerationContext
from context_synth.data import behavior, regional
from context_synth.entities import Product

# subcategory -> (noun choices, qualifier choices); "{brand} {noun} {qualifier}"
_NAME_TEMPLATES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "smartphone": (("Galaxy", "iPhone", "Redmi", "Note", "Find"), ("12", "13", "14", "15", "X", "S", "SE")),
    "laptop": (("ThinkPad", "MacBook", "VivoBook", "IdeaPad", "Pavilion"), ("Pro", "Max", "Plus", "Air", "Ultra")),
    "kaos": (("Kaos",), ("Hitam", "Putih", "Navy", "Premium", "Basic", "Slim Fit")),
    "kemeja": (("Kemeja",), ("Formal", "Casual", "Slim Fit")),
    "celana": (("Celana Jeans", "Celana Chino", "Celana Jogger"), ("Hitam", "Biru", "Abu-abu")),
    "sepatu": (("Sepatu",), ("Sneakers", "Formal", "Casual", "Running")),
    "makanan instan": (("Mie Instan",), ("Original", "Pedas", "Ayam Bawang", "Soto", "Rendang")),
    "minuman": (("Teh", "Air Mineral", "Jus", "Susu"), ("250ml", "500ml", "1L")),
    "bumbu masak": (("Kecap", "Sambal", "Bumbu", "Penyedap"), ("Manis", "Asin", "Pedas")),
    "peralatan dapur": (("Rice Cooker", "Blender", "Mixer", "Kompor"), ("Premium", "Deluxe", "Basic", "Smart")),
    "furniture": (("Sofa", "Meja", "Kursi", "Lemari"), ("Premium", "Deluxe", "Basic", "Minimalis")),
    "skincare": (("Face Wash", "Moisturizer", "Serum", "Toner"), ("50ml", "100ml", "200ml")),
    "vitamin": (("Vitamin C", "Vitamin D", "Vitamin E", "Vitamin B Complex"), ("30 tablet", "60 kapsul")),
    "sepatu olahraga": (("Sepatu Running", "Sepatu Basketball", "Sepatu Futsal"), ("Pro", "Elite", "Training")),
}

_BOOK_TITLES = (
    "Belajar Pemrograman", "Sejarah Indonesia", "Matematika Dasar",
    "Bahasa Inggris", "Novel Remaja", "Motivasi Hidup",
)

_GENERIC_QUALIFIERS: dict[str, tuple[str, ...]] = {
    "electronics": ("Pro", "Max", "Plus", "Air", "Ultra", "Mini", "Lite"),
    "fashion": ("Hitam", "Putih", "Biru", "Merah", "Navy"),
    "home": ("Premium", "Deluxe", "Basic", "Pro", "Smart"),
    "food": ("100gr", "200gr", "500ml", "1L"),
    "health": ("50ml", "100ml", "30 tablet", "60 kapsul"),
    "sports": ("Pro", "Elite", "Training", "Performance"),
}


class ProductGenerator:
    """Generate :class:`Product` entities priced through the pattern engine."""

    def __init__(self, context: GenerationContext) -> None:
        self.context = context

    def product_name(self, brand: str, category: str, subcategory: str) -> str:
        src = self.context.source
        if category == "books":
            return f"{brand} {src.choice(_BOOK_TITLES)}"
        if subcategory == "tv":
            return f'{brand} Smart TV {src.random_int(32, 75)}" 4K'
        template = _NAME_TEMPLATES.get(subcategory)
        if template is not None:
            nouns, qualifiers = template
            return f"{brand} {src.choice(nouns)} {src.choice(qualifiers)}"
        qualifiers = _GENERIC_QUALIFIERS.get(category)
        if qualifiers:
            return f"{brand} {subcategory} {src.choice(qualifiers)}"
        return f"{brand} {subcategory}"

    def generate(self, categories: Optional[Sequence[str]] = None) -> Product:
        """Generate a product, restricted to ``categories`` when any are known."""
        src = self.context.source
        known = list(regional.PRODUCT_CATEGORIES)
        if categories:
            allowed = [c for c in categories if c in regional.PRODUCT_CATEGORIES]
            if allowed:
                known = allowed

        category = src.choice(known)
        subcategory = src.choice(regional.PRODUCT_CATEGORIES[category])
        brand = src.choice(regional.BRANDS_BY_CATEGORY[category])
        tier = src.choice(behavior.PRICE_TIERS)
        price = round(self.context.patterns.realistic_price(category, tier), 2)

        return Product(
            id=src.generate_id(),
            name=self.product_name(brand, category, subcategory),
            category=category,
            subcategory=subcategory,
            description=src.faker.sentence(),
            price=price,
            original_price=round(price * src.random_double(1.0, 1.5), 2),
            brand=brand,
            sku=regional.sku(src, category),
            stock=src.random_int(0, 1000),
            rating=round(src.random_double(1.0, 5.0), 1),
            review_count=src.random_int(0, 500),
            created_date=self.context.clock() - timedelta(days=src.random_int(0, 730)),
            is_active=src.random_bool(0.9),
            images=(src.faker.image_url(),),
        )

    def generate_many(
        self, count: int, categories: Optional[Sequence[str]] = None
    ) -> list[Product]:
        return [self.generate(categories) for _ in range(count)]

    def stream(
        self, count: int = 10, categories: Optional[Sequence[str]] = None
    ) -> Iterator[Product]:
        return (self.generate(categories) for _ in range(count))
