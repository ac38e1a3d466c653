# almacen

An interactive terminal program for keeping track of a small shop's products
and warehouse stock. The interface is in Spanish and uses ANSI colours.

Products belong to one of four categories:

- **A) PAPELERIA**: stationery
- **B) ELECTRONICOS**: electronics, which also have a brand (*marca*)
- **C) ALIMENTOS**: food
- **D) LIBROS**: books, which also have an author (*autor*) and a genre (*genero*)

Every product has a name, a price, a quantity and the date and time it was
added (`dd/mm/YYYY HH:MM:SS`, local time).

## Installation

```
pip install .
```

## Usage

Start the program with:

```
almacen
```

or `python -m almacen.cli`. The command takes no options besides `--help`.

A menu is shown with these options:

```
1) Agregar producto.
2) Editar producto.
3) Eliminar producto.
4) Buscar producto por nombre.
5) Ver lista de productos.
6) Ver resumen del inventario
7) Filtrar productos por categoria o proveedor.
0) Salir.
```

- **1** adds one or more products. For each one you choose a category by its
  letter (either case), then enter its details, price and quantity.
- **2** edits products by their number in the list. You can change the name
  or the price of any product. For books you can also change the genre and
  the author, and for electronics the brand; other products refuse these
  fields.
- **4** searches by name. Case is ignored, but the whole name must match.
- **5** shows every product as a table.
- **7** lists the products in one category, with their prices in soles
  (S/.), keeping their numbers from the full list.
- **0** quits. End of input also ends the program.

Where a number is expected and something else is typed, the program says so
and asks again.

## What it does not do

Options 3 and 6 appear in the menu but do nothing: products cannot be
deleted and there is no inventory summary screen. Nothing is saved to disk;
the inventory lives in memory, holds at most 250 products and is empty each
time the program starts.

## Using the library

The inventory can also be used from Python, through `almacen.inventory`:

```python
from almacen.inventory import (
    Category,
    Inventory,
    Product,
    render_category,
    render_table,
    timestamp,
)

inventory = Inventory(250)
number = inventory.add(
    Product(name="Cuaderno", category=Category.PAPELERIA, price=4.5,
            quantity=10, date=timestamp())
)
inventory.edit(number, "price", 5)
print(render_table(inventory))
print(render_category(inventory, Category.PAPELERIA))
print(inventory.search("cuaderno"))
print(inventory.total_units())
```

- `Inventory.add` returns the new product's number and raises
  `InventoryFullError` at capacity.
- `Inventory.get` and `Inventory.edit` take 1-based numbers and raise
  `IndexError` for unknown ones.
- `Inventory.edit` accepts the fields `name`, `price`, `genre`, `author` and
  `brand`, raises `ValueError` for any other, and raises
  `FieldNotAllowedError` when the product's category lacks the field.
- `parse_category` turns a letter A–D into a `Category`.
- `almacen.colors.paint(text, *styles)` wraps text in ANSI style sequences
  followed by a reset.

## Development

```
pip install -e ".[test]"
pytest
```