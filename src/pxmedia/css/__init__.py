from pxmedia.css.model import AtRule, Declaration, Rule, Stylesheet, is_nested
from pxmedia.css.parser import parse_stylesheet
from pxmedia.css.serializer import stringify

__all__ = [
    "AtRule",
    "Declaration",
    "Rule",
    "Stylesheet",
    "is_nested",
    "parse_stylesheet",
    "stringify",
]
