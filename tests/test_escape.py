"""Tests for HTML escaping and placeholder substitution."""

from shellgate.escape import escape_html
from shellgate.routing.compiler import RouteCompiler
from shellgate.config import BuildConfig
from shellgate.routing.placeholders import (
    create_placeholder,
    display_placeholders,
    substitute,
)


class TestEscapeHtml:
    def test_fixed_table(self) -> None:
        assert escape_html("<script>&\"'/\\") == "&lt;script&gt;&amp;&quot;&#039;&#x2F;&#x5C;"

    def test_no_raw_special_characters_remain(self) -> None:
        escaped = escape_html("<script>&\"'/\\")
        for char in "<>\"'/\\":
            assert char not in escaped
        # Every '&' left over starts a character reference
        assert escaped.count("&") == escaped.count(";")

    def test_other_characters_pass_through(self) -> None:
        assert escape_html("héllo wörld 42 ✓") == "héllo wörld 42 ✓"

    def test_empty(self) -> None:
        assert escape_html("") == ""


class TestSubstitute:
    def test_replaces_known_tokens(self) -> None:
        html = "<p>__ACPS_id__</p>"
        assert substitute(html, {"id": "42"}, escape_html) == "<p>42</p>"

    def test_escapes_values_not_shell(self) -> None:
        html = "<p class='x'>__ACPS_id__</p>"
        result = substitute(html, {"id": "<b>"}, escape_html)
        assert result == "<p class='x'>&lt;b&gt;</p>"

    def test_unknown_tokens_untouched(self) -> None:
        html = "__ACPS_id__ __ACPS_other__"
        assert substitute(html, {"id": "1"}, escape_html) == "1 __ACPS_other__"

    def test_names_with_underscores(self) -> None:
        html = "<a>__ACPS_post_id__</a>"
        assert substitute(html, {"post_id": "7"}, escape_html) == "<a>7</a>"

    def test_repeated_tokens(self) -> None:
        html = "<title>__ACPS_id__</title><h1>__ACPS_id__</h1>"
        assert substitute(html, {"id": "x"}, escape_html) == "<title>x</title><h1>x</h1>"

    def test_shell_round_trip(self) -> None:
        route = RouteCompiler(BuildConfig()).compile("users/[id]/posts/[...rest].page")
        shell = " | ".join(create_placeholder(name) for name in route.params) + " __ACPS_unrelated__"
        values = {"id": "a&b", "rest": "x/y"}

        result = substitute(shell, values, escape_html)

        assert result == "a&amp;b | x&#x2F;y __ACPS_unrelated__"


def test_display_placeholders() -> None:
    assert display_placeholders("/users/__ACPS_id__/index") == "/users/:id/index"


class TestUnderscoreNames:
    def test_trailing_underscore(self) -> None:
        route = RouteCompiler(BuildConfig()).compile("users/[id_].page")
        shell = f"<p>{create_placeholder(route.params[0])}</p>"
        assert shell == "<p>__ACPS_id___</p>"
        assert substitute(shell, {"id_": "42"}, escape_html) == "<p>42</p>"

    def test_doubled_underscore(self) -> None:
        route = RouteCompiler(BuildConfig()).compile("[a__b].page")
        shell = f"<p>{create_placeholder(route.params[0])}</p>"
        assert substitute(shell, {"a__b": "x"}, escape_html) == "<p>x</p>"

    def test_overlapping_names(self) -> None:
        html = "__ACPS_id__|__ACPS_id___"
        assert substitute(html, {"id": "1", "id_": "2"}, escape_html) == "1|2"
