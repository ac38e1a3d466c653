"""Product records and the in-memory inventory that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

DEFAULT_CAPACITY = 250
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"

EDITABLE_FIELDS = frozenset({"name", "price", "genre", "author", "brand"})


class Category(enum.Enum):
    """Product categories, keyed by the letter used to choose them."""

    PAPELERIA = "A"
    ELECTRONICOS = "B"
    ALIMENTOS = "C"
    LIBROS = "D"

    @property
    def letter(self) -> str:
        return self.value


# Fields that only make sense for one category.
FIELD_CATEGORIES = {
    "genre": Category.LIBROS,
    "author": Category.LIBROS,
    "brand": Category.ELECTRONICOS,
}


class InventoryFullError(Exception):
    """Raised when adding a product to an inventory at capacity."""


class FieldNotAllowedError(Exception):
    """Raised when editing a field that the product's category lacks."""

    def __init__(self, field: str, category: Category | None):
        label = category.name if category is not None else "sin categoria"
        super().__init__(f"field {field!r} is not allowed for {label}")
        self.field = field
        self.category = category


def parse_category(letter: str) -> Category:
    """Return the category chosen by a letter A-D (any case)."""
    key = letter.strip().upper()
    try:
        return Category(key)
    except ValueError:
        raise ValueError(f"unknown category: {letter!r}") from None


def timestamp(now: datetime | None = None) -> str:
    """Format a moment (default: the current local time) as dd/mm/YYYY HH:MM:SS."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


@dataclass
class Product:
    name: str
    category: Category | None
    price: float
    quantity: int
    date: str
    brand: str = ""
    author: str = ""
    genre: str = ""


class Inventory:
    """A bounded, ordered collection of products numbered from 1."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.capacity = capacity
        self._products: list[Product] = []

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def add(self, product: Product) -> int:
        """Append a product and return its number."""
        if len(self._products) >= self.capacity:
            raise InventoryFullError(
                f"inventory is full ({self.capacity} products)"
            )
        self._products.append(product)
        return len(self._products)

    def get(self, number: int) -> Product:
        """Return the product with the given 1-based number."""
        if not 1 <= number <= len(self._products):
            raise IndexError(f"no product number {number}")
        return self._products[number - 1]

    def edit(self, number: int, field: str, value) -> Product:
        """Change one editable field of a product and return the product."""
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"field {field!r} cannot be edited")
        product = self.get(number)
        required = FIELD_CATEGORIES.get(field)
        if required is not None and product.category is not required:
            raise FieldNotAllowedError(field, product.category)
        setattr(product, field, float(value) if field == "price" else str(value))
        return product

    def search(self, name: str) -> list[tuple[int, Product]]:
        """Return (number, product) pairs whose name matches, ignoring case."""
        wanted = name.lower()
        return [
            (number, product)
            for number, product in enumerate(self._products, start=1)
            if product.name.lower() == wanted
        ]

    def by_category(self, category: Category) -> list[tuple[int, Product]]:
        """Return (number, product) pairs belonging to a category."""
        return [
            (number, product)
            for number, product in enumerate(self._products, start=1)
            if product.category is category
        ]

    def total_units(self) -> int:
        """Sum of the quantities of all products."""
        return sum(product.quantity for product in self._products)


def _price(value: float) -> str:
    return f"{value:g}"


_TABLE_RULE = "-" * 162
_COLUMNS = (
    ("  NUM", 9),
    ("  Nombre", 22),
    ("  Fecha", 27),
    ("  Precio", 17),
    ("  Marca", 22),
    ("  Autor", 22),
    ("  Genero", 22),
    ("  Cantidad  |", 9),
)


def render_table(inventory: Inventory) -> str:
    """Render every product as a fixed-width table."""
    header = "|" + "|".join(title.ljust(width) for title, width in _COLUMNS)
    lines = [_TABLE_RULE, header, _TABLE_RULE]
    for number, product in enumerate(inventory, start=1):
        cells = (
            (str(number), 9),
            (product.name, 22),
            (product.date, 27),
            (_price(product.price), 17),
            (product.brand, 22),
            (product.author, 22),
            (product.genre, 22),
        )
        row = "|" + "|".join(text.ljust(width) for text, width in cells)
        row += "|" + str(product.quantity).ljust(7) + "  |"
        lines.append(row)
    return "\n".join(lines) + "\n"


def render_search_hit(number: int, product: Product) -> str:
    """Render one search result."""
    rule = "-" * 61
    detail = (
        f"NUM: {number} | Nombre: {product.name} | Precio: {_price(product.price)}"
        f" | Cantidad: {product.quantity} | Fecha: {product.date}"
    )
    return f"PRODUCTO #{number}\n{rule}\n{detail}\n{rule}\n"


def render_category(inventory: Inventory, category: Category) -> str:
    """Render the products of one category, keeping their numbers."""
    rule = "-" * 50
    lines = [rule, f"CATEGORIA {category.name}:", rule]
    lines.extend(
        f"{number}) {product.name} - S/. {_price(product.price)}"
        for number, product in inventory.by_category(category)
    )
    return "\n".join(lines) + "\n"