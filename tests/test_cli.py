from unittest import mock

import pytest

from almacen.cli import App, main
from almacen.inventory import Category, Inventory, Product

DATE = "01/02/2024 10:00:00"


def make_app(lines, inventory=None):
    feed = iter(lines)

    def reader():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    out = []
    inv = inventory if inventory is not None else Inventory()
    return App(inv, reader, out.append), inv, out


@pytest.fixture
def stocked():
    inv = Inventory()
    inv.add(Product("Cuaderno", Category.PAPELERIA, 3.5, 10, DATE))
    return inv


def test_add_paper_product():
    app, inv, out = make_app(["1", "1", "a", "Cuaderno", "3.5", "10", "", "0"])
    assert app.run() == 0
    assert len(inv) == 1
    product = inv.get(1)
    assert product.name == "Cuaderno"
    assert product.category is Category.PAPELERIA
    assert product.price == 3.5
    assert product.quantity == 10
    assert "Hecho!" in "".join(out)


def test_add_book_product():
    app, inv, _ = make_app(
        ["1", "1", "d", "Dune", "Frank Herbert", "Ciencia", "12.5", "2", "", "0"]
    )
    assert app.run() == 0
    product = inv.get(1)
    assert (product.author, product.genre) == ("Frank Herbert", "Ciencia")
    assert inv.total_units() == 2


def test_menu_rejects_non_number():
    app, _, out = make_app(["x", "", "0"])
    assert app.run() == 0
    assert "Entrada invalida. Por favor ingrese un numero." in "".join(out)


def test_unknown_option():
    app, _, out = make_app(["9", "", "0"])
    assert app.run() == 0
    assert "Opcion no valida..." in "".join(out)


def test_menu_returns_number():
    app, _, _ = make_app(["  5 "])
    assert app.menu() == 5


def test_edit_refuses_genre_on_paper(stocked):
    app, inv, out = make_app(["2", "1", "1", "3", "", "S", "0"], stocked)
    assert app.run() == 0
    assert "Este producto no admite un genero..." in "".join(out)
    assert inv.get(1).genre == ""


def test_edit_name(stocked):
    app, inv, _ = make_app(["2", "1", "1", "1", "Libreta", "S", "0"], stocked)
    app.run()
    assert inv.get(1).name == "Libreta"


def test_edit_repeats_while_answer_is_no(stocked):
    app, inv, _ = make_app(
        ["2", "1", "1", "2", "7.25", "N", "1", "Nuevo", "S", "0"], stocked
    )
    app.run()
    assert inv.get(1).price == 7.25
    assert inv.get(1).name == "Nuevo"


def test_search_found(stocked):
    app, _, out = make_app(["4", "cuaderno", "n", "0"], stocked)
    app.run()
    assert "PRODUCTO #1" in "".join(out)


def test_search_missing(stocked):
    app, _, out = make_app(["4", "lapiz", "n", "0"], stocked)
    app.run()
    assert "Producto no encontrado." in "".join(out)


def test_list_empty():
    app, _, out = make_app(["5", "", "0"])
    app.run()
    assert "No hay productos registrados." in "".join(out)


def test_filter_category(stocked):
    app, _, out = make_app(["7", "a", "", "0"], stocked)
    app.run()
    text = "".join(out)
    assert "CATEGORIA PAPELERIA:" in text
    assert "1) Cuaderno - S/. 3.5" in text


def test_end_of_input_stops():
    app, inv, _ = make_app([])
    assert app.run() == 0
    assert len(inv) == 0


def test_main_exits_cleanly(capsys):
    with mock.patch("builtins.input", side_effect=["0", EOFError()]):
        assert main([]) == 0
    assert "Gracias por usar el gestor de productos. Hasta pronto!" in capsys.readouterr().out