import math
import xml.etree.ElementTree as ET

import pytest

from marelles import lattice
from marelles.lattice import (
    MAX_M,
    MAX_N,
    NARROW_CANVAS,
    WIDE_CANVAS,
    Canvas,
    main,
    render_divisors,
    render_factors,
    render_products,
    render_table,
)

NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture(scope="module")
def divisors():
    return render_divisors()


@pytest.fixture(scope="module")
def products():
    return render_products()


@pytest.fixture(scope="module")
def factors():
    return render_factors()


@pytest.fixture(scope="module")
def table():
    return render_table()


def _root(svg):
    return ET.fromstring(svg)


def test_convert_origin_sits_at_margin():
    canvas = Canvas(910.0, 900.0, 10.0, 380.0)
    assert canvas.convert(0.0, 0.0) == (canvas.margin, canvas.height - canvas.margin)


def test_convert_scales_by_coef():
    canvas = WIDE_CANVAS
    xx, yy = canvas.convert(1.0, 2.0)
    assert xx - canvas.margin == pytest.approx(canvas.coef)
    assert (canvas.height - canvas.margin) - yy == pytest.approx(2.0 * canvas.coef)


def test_contains_edges_and_outside():
    canvas = NARROW_CANVAS
    assert canvas.contains(0.0, 0.0)
    assert canvas.contains(canvas.width, canvas.height)
    assert not canvas.contains(-0.5, 10.0)
    assert not canvas.contains(10.0, canvas.height + 0.5)
    assert not canvas.contains(canvas.width + 0.5, 10.0)
    assert not canvas.contains(10.0, -0.5)


@pytest.mark.parametrize("render", [render_divisors, render_products, render_factors, render_table])
def test_document_frame(render):
    svg = render()
    assert svg.startswith('<?xml version="1.0" standalone="no"?>\n<!DOCTYPE svg')
    assert svg.endswith("</svg>\n")
    assert svg.count("<svg ") == 1


def test_divisors_uses_wide_canvas(divisors):
    root = _root(divisors)
    assert float(root.get("width")) == WIDE_CANVAS.width
    assert float(root.get("height")) == WIDE_CANVAS.height


def test_divisors_one_diagonal_per_product(divisors):
    root = _root(divisors)
    assert len(root.findall(f"{NS}line")) == MAX_M * MAX_N


def test_divisors_circles_inside_and_coloured(divisors):
    root = _root(divisors)
    circles = root.findall(f"{NS}circle")
    assert circles
    colours = set()
    for circle in circles:
        assert WIDE_CANVAS.contains(float(circle.get("cx")), float(circle.get("cy")))
        style = dict(part.split(":") for part in circle.get("style").split(";"))
        assert style["fill"] == "black"
        colours.add(style["stroke"])
    assert colours == {"royalblue", "red", "white"}


def test_products_label_every_drawn_point(products):
    root = _root(products)
    circles = root.findall(f"{NS}circle")
    texts = root.findall(f"{NS}text")
    assert len(circles) == len(texts)
    assert 0 < len(circles) <= MAX_M * MAX_N


def test_products_labels_are_lattice_products(products):
    root = _root(products)
    for text in root.findall(f"{NS}text"):
        value = int(text.text)
        assert any(value % m == 0 and value // m <= MAX_N for m in range(1, MAX_M + 1))


def test_factors_labels_show_factor_pairs(factors):
    root = _root(factors)
    bodies = {text.text for text in root.findall(f"{NS}text")}
    assert "2 \u00d7 3" in bodies
    assert "1 \u00d7 1" in bodies


def test_factors_diagonal_label_font_shrinks(factors):
    root = _root(factors)
    diagonal = [t for t in root.findall(f"{NS}text") if t.get("fill") == "rgb(64,64,64)"]
    by_value = {int(t.text): int(t.get("font-size")) for t in diagonal}
    assert by_value[1] == 300
    sizes = [by_value[k] for k in sorted(by_value)]
    assert sizes == sorted(sizes, reverse=True)


def test_table_line_count(table):
    root = _root(table)
    assert len(root.findall(f"{NS}line")) == MAX_M * MAX_N + MAX_M + MAX_N


def test_table_texts_inside_canvas(table):
    root = _root(table)
    texts = root.findall(f"{NS}text")
    assert texts
    for text in texts:
        assert NARROW_CANVAS.contains(float(text.get("x")), float(text.get("y")))


def test_table_product_labels_skip_ones(table):
    root = _root(table)
    white = [int(t.text) for t in root.findall(f"{NS}text") if t.get("fill") == "rgb(255,255,255)"]
    assert white
    assert 6 in white
    assert min(white) == 4


def test_main_default_is_divisors(capsys, divisors):
    assert main([]) == 0
    assert capsys.readouterr().out == divisors


def test_main_selects_figure(capsys, table):
    assert main(["table"]) == 0
    assert capsys.readouterr().out == table


def test_main_rejects_unknown_figure():
    with pytest.raises(SystemExit):
        main(["bogus"])


def test_figures_cover_all_renderers():
    assert set(lattice.FIGURES.values()) == {
        render_divisors,
        render_products,
        render_factors,
        render_table,
    }
    assert math.isclose(NARROW_CANVAS.coef, 380.0)