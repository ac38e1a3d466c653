from almacen.colors import BLUE, BOLD, ON_BLUE, RED, RESET, paint


def test_paint_single_style_matches_escape_codes():
    assert paint("x", RED) == "\033[31mx\033[0m"


def test_paint_without_styles_returns_text():
    assert paint("hola") == "hola"


def test_paint_combines_styles_in_order():
    result = paint("texto", BOLD, ON_BLUE)
    assert result.startswith(BOLD + ON_BLUE)
    assert result.endswith(RESET)
    assert "texto" in result


def test_paint_empty_text_still_resets():
    assert paint("", BLUE) == BLUE + RESET