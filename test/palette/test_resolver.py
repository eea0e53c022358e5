"""Tests for multi-origin color resolution."""

from blockborder.palette import ColorOrigin, ResolvedColor, get_color_by_property, get_multi_origin_color


class TestNamedColorLookup:
    """Lookups by slug."""

    def test_every_palette_color_resolves_by_slug(self, origins):
        """Each color resolves to itself unless an earlier origin shadows its slug."""
        seen = set()
        for origin in origins:
            for color in origin.colors:
                resolved = get_multi_origin_color(origins, named_color=color.slug)
                if color.slug in seen:
                    continue
                seen.add(color.slug)
                assert resolved == ResolvedColor.from_color(color)

    def test_first_origin_wins_for_duplicate_slug(self, origins):
        """Slug present in default and theme resolves to the default entry."""
        resolved = get_multi_origin_color(origins, named_color="red")
        assert resolved.color == "#e65054"
        assert resolved.name == "Red"

    def test_later_origin_color_is_found(self, origins):
        resolved = get_multi_origin_color(origins, named_color="yellow")
        assert resolved.slug == "yellow"
        assert resolved.color == "#bd8600"

    def test_unknown_slug_without_custom_color(self, origins):
        resolved = get_multi_origin_color(origins, named_color="missing")
        assert resolved == ResolvedColor(color=None)
        assert resolved.is_named is False

    def test_unknown_slug_falls_back_to_custom_color(self, origins):
        resolved = get_multi_origin_color(origins, named_color="missing", custom_color="#00a32a")
        assert resolved.slug == "green"

    def test_named_match_takes_priority_over_custom(self, origins):
        resolved = get_multi_origin_color(origins, named_color="gray", custom_color="#00a32a")
        assert resolved.slug == "gray"


class TestCustomColorLookup:
    """Lookups by literal value."""

    def test_custom_color_matching_palette_returns_named_color(self, origins):
        resolved = get_multi_origin_color(origins, custom_color="#e65054")
        assert resolved.slug == "red"
        assert resolved.color == "#e65054"

    def test_first_origin_wins_for_duplicate_value(self, origins):
        """#72aee6 is blue in default and theme-blue in theme."""
        resolved = get_multi_origin_color(origins, custom_color="#72aee6")
        assert resolved.slug == "blue"

    def test_unknown_custom_color_is_unnamed_literal(self, origins):
        for value in ("#123456", "#unknown", "rgb(1, 2, 3)"):
            resolved = get_multi_origin_color(origins, custom_color=value)
            assert resolved == ResolvedColor(color=value)
            assert resolved.slug is None

    def test_value_match_is_exact(self, origins):
        """Case differences do not match."""
        resolved = get_multi_origin_color(origins, custom_color="#E65054")
        assert resolved.slug is None
        assert resolved.color == "#E65054"


class TestEmptyLookups:
    """Lookups with nothing to resolve."""

    def test_no_arguments(self, origins):
        assert get_multi_origin_color(origins) == ResolvedColor(color=None)

    def test_empty_origins(self):
        assert get_multi_origin_color([], named_color="blue") == ResolvedColor(color=None)
        assert get_multi_origin_color([], custom_color="#fff") == ResolvedColor(color="#fff")

    def test_empty_origin_is_skipped(self, origins):
        resolved = get_multi_origin_color([ColorOrigin(name="empty")] + origins, named_color="gray")
        assert resolved.slug == "gray"

    def test_deterministic(self, origins):
        first = get_multi_origin_color(origins, custom_color="#00a32a")
        second = get_multi_origin_color(origins, custom_color="#00a32a")
        assert first == second


class TestGetColorByProperty:
    """Tests for the underlying scan."""

    def test_returns_color_record(self, origins):
        color = get_color_by_property(origins, "slug", "green")
        assert color is not None
        assert color.name == "Green"

    def test_returns_none_on_miss(self, origins):
        assert get_color_by_property(origins, "color", "#000000") is None
