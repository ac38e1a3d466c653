"""Interactive menu for managing the product inventory."""

from __future__ import annotations

import argparse
import sys

from .colors import (
    BLUE,
    GREEN,
    ON_BLUE,
    ON_GREEN,
    ON_RED,
    ON_YELLOW,
    RED,
    YELLOW,
    paint,
)
from .inventory import (
    FIELD_CATEGORIES,
    Category,
    Inventory,
    InventoryFullError,
    Product,
    parse_category,
    render_category,
    render_search_hit,
    render_table,
    timestamp,
)

CLEAR_SCREEN = "\033[2J\033[H"
CATEGORY_CHOICES = "A) PAPELERIA | B) ELECTRONICOS | C) ALIMENTOS | D) LIBROS"
INVALID_NUMBER = "Entrada invalida. Por favor ingrese un numero."

_EDIT_FIELDS = {1: "name", 2: "price", 3: "genre", 4: "author", 5: "brand"}
_EDIT_PROMPTS = {
    "name": "\nNuevo Nombre: ",
    "price": "\nNuevo Precio: ",
    "genre": "\nNuevo Genero: ",
    "author": "\nNuevo Autor: ",
    "brand": "\nNueva Marca: ",
}
_REFUSALS = {
    "genre": "Este producto no admite un genero...",
    "author": "Este producto no admite un autor..",
    "brand": "Este producto no admite una marca..",
}
_CATEGORY_COLORS = {
    Category.PAPELERIA: YELLOW,
    Category.ELECTRONICOS: BLUE,
    Category.ALIMENTOS: GREEN,
    Category.LIBROS: RED,
}
_MENU_ITEMS = (
    "1) Agregar producto.",
    "2) Editar producto.",
    "3) Eliminar producto.",
    "4) Buscar producto por nombre.",
    "5) Ver lista de productos.",
    "6) Ver resumen del inventario",
    "7) Filtrar productos por categoria o proveedor.",
    "0) Salir.",
)


class App:
    """The menu-driven program; reads lines from ``reader`` and writes text to ``writer``."""

    def __init__(self, inventory, reader, writer):
        self.inventory = inventory
        self._read = reader
        self._write = writer

    def _say(self, text="", *styles):
        self._write(paint(text, *styles) + "\n")

    def _ask(self, prompt, *styles):
        self._write(paint(prompt, *styles))
        return self._read()

    def _ask_int(self, prompt, *styles):
        while True:
            raw = self._ask(prompt, *styles)
            try:
                return int(raw.strip())
            except ValueError:
                self._say(INVALID_NUMBER, ON_RED)

    def _ask_float(self, prompt, *styles):
        while True:
            raw = self._ask(prompt, *styles)
            try:
                return float(raw.strip())
            except ValueError:
                self._say(INVALID_NUMBER, ON_RED)

    def _pause(self):
        self._write("Presione Enter para continuar . . .")
        try:
            self._read()
        except EOFError:
            self._write("\n")

    def _clear(self):
        self._write(CLEAR_SCREEN)

    def _banner(self, title):
        margin = " " * 50
        rule = "*" * 55
        for line in (rule, f"{title:^55}", rule):
            self._say(margin + line, GREEN)

    def _report_empty(self):
        if len(self.inventory):
            return False
        self._say("No hay productos registrados.", ON_RED)
        self._pause()
        return True

    def menu(self):
        """Show the main menu until a number is entered, and return it."""
        while True:
            self._clear()
            rule = "=" * 58
            self._write(paint(rule + "\n", ON_GREEN))
            self._say("              [GESTOR DE PRODUCTOS Y ALMACEN]             ", ON_GREEN)
            self._say(rule, ON_GREEN)
            self._say("\n".join(_MENU_ITEMS), BLUE)
            self._say("Seleccione una opcion:", ON_YELLOW)
            raw = self._read()
            try:
                return int(raw.strip())
            except ValueError:
                self._clear()
                self._say(INVALID_NUMBER, ON_RED)
                self._pause()

    def run(self):
        """Run the menu loop until the user leaves; return the exit status."""
        handlers = {
            1: self._add,
            2: self._edit,
            3: lambda: None,
            4: self._search,
            5: self._list,
            6: lambda: None,
            7: self._filter,
        }
        while True:
            try:
                option = self.menu()
            except EOFError:
                return 0
            self._clear()
            if option == 0:
                self._say("\nGracias por usar el gestor de productos. Hasta pronto!", ON_GREEN)
                self._pause()
                return 0
            handler = handlers.get(option)
            if handler is None:
                self._say("Opcion no valida...", ON_RED)
                self._pause()
                continue
            try:
                handler()
            except EOFError:
                return 0

    def _add(self):
        self._banner("AGREGAR_PRODUCTO")
        count = self._ask_int("*Cuantos tipos de productos quieres ingresar?\n", GREEN)
        self._say("\nIngrese los productos:", ON_YELLOW)
        for position in range(count):
            date = timestamp()
            self._write("\nCategoria: ")
            letter = self._ask("Elija entre: " + CATEGORY_CHOICES + "\n", RED)
            try:
                category = parse_category(letter)
            except ValueError:
                category = None
            name = brand = author = genre = ""
            if category is not None:
                name = self._ask("Nombre del producto:", GREEN)
                if category is Category.ELECTRONICOS:
                    brand = self._ask("\nMarca del producto: ", GREEN).strip()
                elif category is Category.LIBROS:
                    author = self._ask("\nAutor: ", GREEN)
                    genre = self._ask("\nGenero: ").strip()
            price = self._ask_float("\nPrecio:", GREEN)
            quantity = self._ask_int("\nCantidad:")
            product = Product(name, category, price, quantity, date,
                              brand=brand, author=author, genre=genre)
            try:
                self.inventory.add(product)
            except InventoryFullError as exc:
                self._say(str(exc), ON_RED)
                self._pause()
                return
            self._say(f"\nFecha de ingreso: {date}")
            if position == count - 1:
                self._say("\nHecho!", ON_BLUE)
                self._pause()
            else:
                self._say("\n" + "=" * 35, ON_YELLOW)

    def _edit(self):
        self._banner("EDITAR")
        if self._report_empty():
            return
        self._write(render_table(self.inventory))
        count = self._ask_int("\nNumero de productos a editar: ", GREEN)
        for _ in range(count):
            number = self._ask_int("\nNumero del producto: ", BLUE)
            try:
                product = self.inventory.get(number)
            except IndexError:
                self._say("Producto no encontrado.", RED)
                continue
            while True:
                self._clear()
                self._say("=" * 100, BLUE)
                self._say("[MENU DE EDICION]".rjust(56), BLUE)
                self._say("=" * 100, BLUE)
                choice = self._ask_int(
                    " 1) Nombre | 2) Precio | 3) Genero (libros) | 4) Autor (libros)"
                    " | 5) Marca (electronicos) \n",
                    RED,
                )
                self._apply_edit(number, product, _EDIT_FIELDS.get(choice))
                self._write(paint("Desea pasar al siguiente producto? ", GREEN))
                answer = self._ask("(S/N)", YELLOW)
                if answer.strip() not in ("N", "n"):
                    break

    def _apply_edit(self, number, product, field):
        if field is None:
            self._say("Opcion no valida...", RED)
            return
        required = FIELD_CATEGORIES.get(field)
        if required is not None and product.category is not required:
            self._say(_REFUSALS[field], RED)
            self._pause()
            return
        if field == "price":
            value = self._ask_float(_EDIT_PROMPTS[field])
        else:
            value = self._ask(_EDIT_PROMPTS[field])
        self.inventory.edit(number, field, value)

    def _search(self):
        self._banner("BUSCAR_POR_NOMBRE")
        while True:
            name = self._ask("Ingrese nombre: ", GREEN)
            hits = self.inventory.search(name)
            for number, product in hits:
                self._write(paint(render_search_hit(number, product), GREEN))
            if not hits:
                self._say("Producto no encontrado.", RED)
            answer = self._ask("Seguir buscando(S/N): ", RED)
            if answer.strip() not in ("s", "S"):
                break

    def _list(self):
        self._banner("VER_LISTA")
        if self._report_empty():
            return
        self._write(render_table(self.inventory))
        self._pause()

    def _filter(self):
        self._banner("CATEGORIA")
        if self._report_empty():
            return
        self._say("Que categoria quiere ver? ", BLUE)
        letter = self._ask(CATEGORY_CHOICES + "\n", YELLOW)
        try:
            category = parse_category(letter)
        except ValueError:
            category = None
        self._clear()
        if category is not None:
            self._write(paint(render_category(self.inventory, category),
                              _CATEGORY_COLORS[category]))
        self._pause()


def _write_stdout(text):
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv=None):
    """Start the interactive inventory manager."""
    parser = argparse.ArgumentParser(
        prog="almacen", description="Gestor de productos y almacen."
    )
    parser.parse_args(argv)
    app = App(Inventory(), input, _write_stdout)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())