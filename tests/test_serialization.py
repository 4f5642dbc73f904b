"""Tests for token stream JSON serialization."""

import json

import pytest

from linemd import parse
from linemd.serialization import from_dict, from_json, to_dict, to_json
from linemd.tokens import CodeFence, Header, LineBreak, ListItem, Text, Url


class TestToDict:
    def test_text(self) -> None:
        assert to_dict(Text("a", bold=True)) == {
            "_type": "Text",
            "value": "a",
            "bold": True,
            "italic": False,
            "code": False,
        }

    def test_line_break(self) -> None:
        assert to_dict(LineBreak()) == {"_type": "LineBreak"}

    def test_url_name_nested(self) -> None:
        data = to_dict(Url(url="u", name=Text("n")))
        assert data["name"]["_type"] == "Text"
        assert data["name"]["value"] == "n"

    def test_unnamed_url(self) -> None:
        assert to_dict(Url(url="u"))["name"] is None

    def test_list_item_place(self) -> None:
        assert to_dict(ListItem(4)) == {"_type": "ListItem", "place": 4}

    def test_non_token_raises(self) -> None:
        with pytest.raises(TypeError, match="Not a token: str"):
            to_dict("x")  # type: ignore[arg-type]


class TestFromDict:
    @pytest.mark.parametrize(
        "token",
        [
            Text.inline_code("x"),
            Url(url="u", name=Text("n", italic=True), is_image=True),
            Header(3),
            ListItem(None),
            CodeFence(code="a\nb", attrs="rust,norun"),
            LineBreak(),
        ],
    )
    def test_reconstructs(self, token) -> None:
        assert from_dict(to_dict(token)) == token

    def test_missing_fields_use_defaults(self) -> None:
        assert from_dict({"_type": "Text", "value": "a"}) == Text("a")

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"value": "a"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type: 'Table'"):
            from_dict({"_type": "Table"})

    def test_not_a_dict(self) -> None:
        with pytest.raises(ValueError, match="got list"):
            from_dict([])  # type: ignore[arg-type]


class TestJson:
    def test_stream_round_trip(self) -> None:
        tokens = parse("# Hello **World**\n- a\n```py\nx\n```\n<u>")
        assert from_json(to_json(tokens)) == tokens

    def test_deterministic(self) -> None:
        tokens = parse("*a* b")
        assert to_json(tokens) == to_json(list(tokens))
        assert to_json(tokens).index('"_type"') < to_json(tokens).index('"italic"')

    def test_indent(self) -> None:
        assert "\n" in to_json([LineBreak()], indent=2)

    def test_empty_stream(self) -> None:
        assert to_json([]) == "[]"
        assert from_json("[]") == []

    def test_non_array_rejected(self) -> None:
        with pytest.raises(ValueError, match="JSON array"):
            from_json(json.dumps({"_type": "LineBreak"}))
