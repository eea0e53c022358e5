"""Tests for border hydration."""

import copy

from blockborder.borders import hydrate_border


class TestFlatHydration:
    """Flat borders with a named color."""

    def test_named_color_fills_literal(self, origins):
        attributes = {
            "borderColor": "blue",
            "style": {"border": {"width": "2px", "style": "solid"}},
        }

        assert hydrate_border(attributes, origins) == {
            "width": "2px",
            "style": "solid",
            "color": "#72aee6",
        }

    def test_unknown_slug_returns_border_unchanged(self, origins):
        border = {"width": "2px"}
        attributes = {"borderColor": "missing", "style": {"border": border}}

        assert hydrate_border(attributes, origins) == {"width": "2px"}

    def test_named_color_without_style(self, origins):
        assert hydrate_border({"borderColor": "green"}, origins) == {"color": "#00a32a"}


class TestSplitHydration:
    """Split borders with per-side named colors."""

    def test_sides_in_mapping_are_resolved(self, origins):
        attributes = {
            "sideBorderColors": {"top": "red", "left": "yellow"},
            "style": {
                "border": {
                    "top": {"width": "1px"},
                    "right": {"color": "#123456", "width": "3px"},
                    "left": {"style": "dashed"},
                }
            },
        }

        assert hydrate_border(attributes, origins) == {
            "top": {"width": "1px", "color": "#e65054"},
            "right": {"color": "#123456", "width": "3px"},
            "left": {"style": "dashed", "color": "#bd8600"},
        }

    def test_side_missing_from_style_is_created(self, origins):
        attributes = {"sideBorderColors": {"bottom": "gray"}, "style": {"border": {}}}

        assert hydrate_border(attributes, origins) == {"bottom": {"color": "#f6f7f7"}}

    def test_unresolved_side_is_untouched(self, origins):
        attributes = {
            "sideBorderColors": {"top": "missing"},
            "style": {"border": {"top": {"width": "1px"}}},
        }

        assert hydrate_border(attributes, origins) == {"top": {"width": "1px"}}


class TestHydrationRules:
    """Priority, pass-through and immutability."""

    def test_literal_colors_pass_through(self, origins):
        border = {"color": "#abcdef", "width": "1px"}
        assert hydrate_border({"style": {"border": border}}, origins) == border

    def test_no_border(self, origins):
        assert hydrate_border({}, origins) is None
        assert hydrate_border({"style": {}}, origins) is None

    def test_border_color_wins_over_side_colors(self, origins):
        attributes = {
            "borderColor": "blue",
            "sideBorderColors": {"top": "red"},
            "style": {"border": {"width": "1px"}},
        }

        assert hydrate_border(attributes, origins) == {"width": "1px", "color": "#72aee6"}

    def test_input_is_not_mutated(self, origins):
        attributes = {
            "sideBorderColors": {"top": "red"},
            "style": {"border": {"top": {"width": "1px"}}},
        }
        snapshot = copy.deepcopy(attributes)

        hydrate_border(attributes, origins)
        hydrate_border({**attributes, "borderColor": "blue"}, origins)

        assert attributes == snapshot

    def test_hydration_is_idempotent(self, origins):
        attributes = {"borderColor": "blue", "style": {"border": {"width": "1px"}}}
        first = hydrate_border(attributes, origins)
        second = hydrate_border({**attributes, "style": {"border": first}}, origins)

        assert first == second
