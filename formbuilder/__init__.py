"""
formbuilder - build html form elements and render them to strings
"""
from .element import (
    VOID_ELEMENTS,
    Element,
    Flag,
    MalformedAttributeValue,
    Text,
    TokenSet,
    escape,
)
from .inputs import Color, Input, Label, Textarea, TextContent, ValueAttribute

__all__ = [
    "VOID_ELEMENTS",
    "Element",
    "Flag",
    "MalformedAttributeValue",
    "Text",
    "TokenSet",
    "escape",
    "Color",
    "Input",
    "Label",
    "Textarea",
    "TextContent",
    "ValueAttribute",
]
