"""Tests for runtime/substitution.py - placeholder substitution."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from typedliterals.runtime.substitution import substitute

identifiers = st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True)


class TestSubstitute:
    """Placeholder replacement behaviour."""

    def test_single_placeholder(self) -> None:
        assert substitute({"name": "Dave"}, "Je m'appelle {name}") == "Je m'appelle Dave"

    def test_whitespace_inside_braces_matches(self) -> None:
        assert substitute({"name": "Dave"}, "Hi {  name }, {name}!") == "Hi Dave, Dave!"

    def test_multiple_keys(self) -> None:
        result = substitute({"a": "1", "b": "2"}, "{a} + {b} = {a}{b}")

        assert result == "1 + 2 = 12"

    def test_unmatched_placeholder_left_verbatim(self) -> None:
        assert substitute({"name": "Dave"}, "{greeting}, {name}") == "{greeting}, Dave"

    def test_unused_value_ignored(self) -> None:
        assert substitute({"unused": "x"}, "Hello") == "Hello"

    def test_value_with_backslashes_inserted_literally(self) -> None:
        assert substitute({"path": r"C:\new\1"}, "Open {path}") == r"Open C:\new\1"

    def test_key_with_regex_metacharacters(self) -> None:
        assert substitute({"a.b": "x"}, "{a.b} {aXb}") == "x {aXb}"

    def test_partial_key_does_not_match(self) -> None:
        assert substitute({"name": "Dave"}, "{names}") == "{names}"

    @given(key=identifiers, value=st.text(alphabet=st.characters(exclude_characters="{}")))
    def test_placeholder_always_replaced(self, key: str, value: str) -> None:
        assert substitute({key: value}, f"<{{{key}}}>") == f"<{value}>"

    @given(template=st.text(alphabet=st.characters(exclude_characters="{}")))
    def test_template_without_placeholders_unchanged(self, template: str) -> None:
        assert substitute({"name": "Dave"}, template) == template
