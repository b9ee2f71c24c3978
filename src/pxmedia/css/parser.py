"""Lark-based stylesheet parser producing the mutable model in ``css.model``."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from pxmedia.css.model import AtRule, Declaration, Rule, Stylesheet
from pxmedia.errors import ParseError

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)

# Strings are matched first so comment markers and whitespace inside them
# are left alone.
_TEXT_RE = re.compile(
    r"""
    (?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
    | (?P<comment>/\*.*?\*/)
    | (?P<ws>\s+)
    """,
    re.VERBOSE | re.DOTALL,
)


def _strip(raw: str, collapse_ws: bool) -> str:
    def repl(match: re.Match[str]) -> str:
        if match.group("comment"):
            return ""
        if match.group("ws") and collapse_ws:
            return " "
        return match.group(0)

    return _TEXT_RE.sub(repl, raw).strip()


def _clean(raw: str) -> str:
    """Drop inline comments and collapse whitespace outside strings."""
    return _strip(raw, collapse_ws=True)


def _parse_declaration(token: Token) -> Declaration:
    """Split a raw ``prop: value [!important]`` token into a Declaration."""
    raw = _strip(str(token), collapse_ws=False)
    prop, sep, value = raw.partition(":")
    prop = prop.strip()
    if not sep or not prop:
        raise ParseError(
            f"Expected 'property: value', got {raw!r}",
            line=token.line,
            column=token.column,
        )
    value = value.strip()
    important = False
    match = _IMPORTANT_RE.search(value)
    if match:
        important = True
        value = value[: match.start()]
    return Declaration(prop=prop, value=value.strip(), important=important)


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into model nodes."""

    def declaration(self, items: list[Token]) -> Declaration:
        return _parse_declaration(items[0])

    def style_rule(self, items: list[object]) -> Rule:
        selector = _clean(str(items[0]))
        declarations = [d for d in items[1:] if isinstance(d, Declaration)]
        return Rule(selector=selector, declarations=declarations)

    def _at_parts(self, items: list[object]) -> tuple[str, str, list[object]]:
        name = str(items[0])[1:]
        params = ""
        rest = items[1:]
        if rest and isinstance(rest[0], Token) and rest[0].type == "PRELUDE":
            params = _clean(str(rest[0]))
            rest = rest[1:]
        return name, params, rest

    def at_rule(self, items: list[object]) -> AtRule:
        name, params, children = self._at_parts(items)
        return AtRule(name=name, params=params, nodes=list(children))

    def at_statement(self, items: list[object]) -> AtRule:
        name, params, _ = self._at_parts(items)
        return AtRule(name=name, params=params, has_block=False)

    def start(self, items: list[object]) -> Stylesheet:
        return Stylesheet(nodes=list(items))


@lru_cache(maxsize=1)
def _get_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet *source* into a :class:`Stylesheet`.

    Raises :class:`ParseError` with the offending line/column when the source
    is not well formed.
    """
    try:
        tree = _get_parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    try:
        return CssTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from e
        raise
