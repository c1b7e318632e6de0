"""Tests for value classification and rendering."""

from stylegraft.compiler.values import (
    CommaList,
    Literal,
    SpaceList,
    render_value,
    to_value,
)
from stylegraft.units import em, pt, px


def render(raw):
    return render_value(to_value(raw))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestToValue:
    def test_string_is_literal(self):
        assert to_value("bold") == Literal("bold")

    def test_number_is_literal(self):
        assert to_value(0) == Literal(0)

    def test_quantity_kept(self):
        assert to_value(px(3)) == px(3)

    def test_outer_list_is_space_list(self):
        assert to_value(["a", "b"]) == SpaceList((Literal("a"), Literal("b")))

    def test_nested_list_is_comma_list(self):
        value = to_value(["a", ("b", "c")])
        assert isinstance(value, SpaceList)
        assert value.items[1] == CommaList((Literal("b"), Literal("c")))

    def test_third_level_is_space_list_again(self):
        value = to_value([[["x", "y"]]])
        assert isinstance(value, SpaceList)
        assert isinstance(value.items[0], CommaList)
        assert isinstance(value.items[0].items[0], SpaceList)

    def test_classified_values_pass_through(self):
        tagged = CommaList((Literal("a"),))
        assert to_value(tagged) is tagged


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRenderValue:
    def test_string_verbatim(self):
        assert render('"Helvetica Neue"') == '"Helvetica Neue"'

    def test_integer(self):
        assert render(42) == "42"

    def test_float(self):
        assert render(1.5) == "1.5"

    def test_quantity(self):
        assert render(em(2)) == "2em"

    def test_converted_quantity(self):
        assert render(px(pt(1))) == "1.3333333333px"

    def test_space_list(self):
        assert render(["16px", "sans-serif"]) == "16px sans-serif"

    def test_comma_list_inside_space_list(self):
        assert (
            render(["16px", ("Helvetica", "Arial", "sans-serif")])
            == "16px Helvetica,Arial,sans-serif"
        )

    def test_space_list_inside_comma_list(self):
        value = [[["1px", "solid"], ["2px", "dashed"]]]
        assert render(value) == "1px solid,2px dashed"

    def test_quantities_in_lists(self):
        assert render([px(1), px(2), 0]) == "1px 2px 0"

    def test_empty_list(self):
        assert render([]) == ""

    def test_deterministic(self):
        value = to_value(["a", ["b", ["c", "d"]]])
        assert render_value(value) == render_value(value)
