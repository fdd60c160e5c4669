"""
element - the attribute and render model shared by every form element

An Element holds a tag, an ordered set of attributes, an ordered set of
data-* attributes and optionally some inner html. Nothing is escaped
when it is stored; escaping happens when the element is rendered (or
read back through an escaped getter), so it is never applied twice.

Does not build trees of elements. Composite markup (whole forms etc) is
made by concatenating the render() output of several elements.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple, Union
import html
import logging

logger = logging.getLogger(__name__)

# in html5 these elements can not have a closing tags (or content)
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

# attributes that always hold a list of space separated tokens
TOKEN_ATTRIBUTES = {"class"}


class MalformedAttributeValue(ValueError):
    """
    Raised by strict elements when an attribute value can not be
    represented as text, a flag or a list of tokens
    """


@dataclass(frozen=True)
class Text:
    """Plain attribute value, rendered as name="value" """

    value: str


@dataclass(frozen=True)
class Flag:
    """Boolean attribute. True renders the bare name, False nothing"""

    value: bool


@dataclass(frozen=True)
class TokenSet:
    """Ordered, duplicate free list of tokens (eg class names)"""

    tokens: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: Any) -> TokenSet:
        """
        parse - build a TokenSet from a space separated string or an
            list of tokens (each of which may itself hold spaces). Any other
            value is converted to a string first.
            Duplicates are dropped, first occurrence wins.
        """
        if value is None:
            return cls()
        if not isinstance(value, (list, tuple, set, frozenset)):
            value = [value]
        seen: dict[str, None] = {}
        for item in value:
            for token in str(item).split():
                seen.setdefault(token, None)
        return cls(tuple(seen))

    def union(self, other: TokenSet) -> TokenSet:
        return TokenSet(tuple(dict.fromkeys(self.tokens + other.tokens)))

    def difference(self, other: TokenSet) -> TokenSet:
        return TokenSet(tuple(t for t in self.tokens if t not in other.tokens))

    def joined(self) -> str:
        return " ".join(self.tokens)


AttributeValue = Union[Text, Flag, TokenSet]
AttributeSource = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def escape(value: Any) -> str:
    """
    escape - html encode a value for use as text or inside a quoted
        attribute. Encodes & < > " and '
    """
    return html.escape(str(value), quote=True)


def _pairs(source: AttributeSource) -> Iterable[Tuple[str, Any]]:
    if isinstance(source, Mapping):
        return source.items()
    return source


class Element:
    """
    An HTML element. Has a tag, optionally attributes, data attributes
    and content
    """

    def __init__(
        self,
        tagName: str,
        id: Optional[str] = None,
        classname: Optional[Union[str, Iterable[str]]] = None,
        attributes: Optional[AttributeSource] = None,
        content: Optional[str] = None,
        isvoid: Optional[bool] = None,
        strict: bool = False,
    ):
        """
        tagName: type of this tag
        id: id for the tag (optional)
        classname: class(es) for this element, a space separated string or
            a list of names
        attributes: a mapping or an iterable of (name, value) pairs to be
            created as attributes, in order
        content: raw html that is output between the opening and closing
            tags
        isvoid: set this as a void element when true. Void elements have no
            closing tag and never render content. When not supplied, this
            is a void element if the tag is one of the void element tags.
        strict: when true, attribute values that are not text, numbers,
            flags or token lists raise MalformedAttributeValue instead of
            being converted to text
        """
        self.tagName = tagName.lower()
        if isvoid is None:
            isvoid = self.tagName in VOID_ELEMENTS
        self.isvoid = isvoid
        self.strict = strict
        self.content = None if content is None else str(content)

        self.attributes: dict[str, AttributeValue] = {}
        self.data: dict[str, Any] = {}

        if attributes:
            self.setAttribute(attributes)
        if id:
            self.setAttribute("id", id)
        if classname:
            self.addClass(classname)

    # attributes

    def setAttribute(
        self, name: Union[str, AttributeSource], value: Any = True
    ) -> Element:
        """
        setAttribute - set (create or overwrite) an attribute of this
            Element
        name: name of attribute, or a mapping/iterable of (name, value)
            pairs which are set one at a time
        value: value of attribute. True/False make a boolean attribute,
            a list/tuple/set makes a token list, None removes the
            attribute. Defaults to True so flags can be set by name only.

        returns self
        """
        if not isinstance(name, str):
            for n, v in _pairs(name):
                self.setAttribute(n, v)
            return self

        if value is None:
            return self.removeAttribute(name)

        self.attributes[name] = self._coerce(name, value)
        return self

    def _coerce(self, name: str, value: Any) -> AttributeValue:
        """
        _coerce - convert a python value to its attribute representation
        """
        if isinstance(value, (Text, Flag, TokenSet)):
            if name in TOKEN_ATTRIBUTES and isinstance(value, Text):
                return TokenSet.parse(value.value)
            return value
        if isinstance(value, bool):
            return Flag(value)
        if isinstance(value, (list, tuple, set, frozenset)):
            return TokenSet.parse(value)

        if not isinstance(value, (str, int, float)):
            if self.strict:
                raise MalformedAttributeValue(
                    f"Can not use {type(value).__name__} as value of attribute {name}"
                )
            logger.debug(
                "Converting %s value of attribute %r to text",
                type(value).__name__,
                name,
            )

        if name in TOKEN_ATTRIBUTES:
            return TokenSet.parse(str(value))
        return Text(str(value))

    def getAttribute(self, name: Optional[str] = None) -> Any:
        """
        getAttribute - return the value of an attribute if it exists
        name: attribute to read. When omitted, a dict of all attributes
            (in order) is returned

        Token lists are returned joined with single spaces, flags as bool
        """
        if name is None:
            return {n: self._plain(v) for n, v in self.attributes.items()}
        value = self.attributes.get(name, None)
        if value is None:
            return None
        return self._plain(value)

    @staticmethod
    def _plain(value: AttributeValue) -> Union[str, bool]:
        if isinstance(value, TokenSet):
            return value.joined()
        return value.value

    def removeAttribute(self, name: str) -> Element:
        """
        removeAttribute - remove an attribute from this Element if it exists
        name: name of attribute to delete
        """
        self.attributes.pop(name, None)
        return self

    @property
    def id(self) -> Optional[str]:
        """
        id - return the id of this element or None if no id
        """
        return self.getAttribute("id")

    @id.setter
    def id(self, id: str) -> None:
        """
        id - set id
        """
        self.setAttribute("id", id)

    # classes

    def addClass(self, classes: Union[str, Iterable[str]]) -> Element:
        """
        addClass - add one or more class names to this element
        classes: a class name, a space separated string of names or a list
            of names. Names already present are not duplicated
        """
        current = self.attributes.get("class")
        if not isinstance(current, TokenSet):
            # a bare "class" flag holds no tokens
            current = TokenSet()
        added = TokenSet.parse(classes)
        if not added.tokens and "class" not in self.attributes:
            return self
        self.attributes["class"] = current.union(added)
        return self

    def removeClass(self, classes: Union[str, Iterable[str]]) -> Element:
        """
        removeClass - remove one or more class names from this element.
            Nothing happens when the element has no class attribute
        """
        current = self.attributes.get("class")
        if current is None:
            return self
        if not isinstance(current, TokenSet):
            current = TokenSet()
        self.attributes["class"] = current.difference(TokenSet.parse(classes))
        return self

    # boolean attributes

    def required(self, flag: bool = True) -> Element:
        return self.setAttribute("required", flag)

    def disabled(self, flag: bool = True) -> Element:
        return self.setAttribute("disabled", flag)

    def readonly(self, flag: bool = True) -> Element:
        return self.setAttribute("readonly", flag)

    def autofocus(self, flag: bool = True) -> Element:
        return self.setAttribute("autofocus", flag)

    def hidden(self, flag: bool = True) -> Element:
        return self.setAttribute("hidden", flag)

    def multiple(self, flag: bool = True) -> Element:
        return self.setAttribute("multiple", flag)

    def checked(self, flag: bool = True) -> Element:
        return self.setAttribute("checked", flag)

    def selected(self, flag: bool = True) -> Element:
        return self.setAttribute("selected", flag)

    # data attributes

    def setData(self, name: Union[str, AttributeSource], value: Any = None) -> Element:
        """
        setData - set a data-* attribute
        name: name without the "data-" prefix, or a mapping/iterable of
            (name, value) pairs
        value: converted to a string when rendered
        """
        if not isinstance(name, str):
            for n, v in _pairs(name):
                self.data[n] = v
            return self
        self.data[name] = value
        return self

    def getData(self, name: Optional[str] = None) -> Any:
        """
        getData - return a data-* value, None if it does not exist. With no
            name, return a copy of all data values
        """
        if name is None:
            return dict(self.data)
        return self.data.get(name, None)

    def removeData(self, name: Optional[str] = None) -> Element:
        """
        removeData - remove a data-* attribute. With no name, remove all of
            them
        """
        if name is None:
            self.data.clear()
        else:
            self.data.pop(name, None)
        return self

    # content

    def html(self, content: Optional[str] = None) -> Any:
        """
        html - get (no argument) or set the raw inner html of this element.
            The setter stores the string as is and returns self
        """
        if content is None:
            return self.content
        self.content = str(content)
        return self

    # rendering

    def renderAttributes(self) -> str:
        """
        renderAttributes - render attributes and data attributes, each with
            a leading space
        """
        dest: list[str] = []
        for name, value in self.attributes.items():
            if isinstance(value, Flag):
                if value.value:
                    dest.append(f" {name}")
            elif isinstance(value, TokenSet):
                dest.append(f' {name}="{escape(value.joined())}"')
            else:
                dest.append(f' {name}="{escape(value.value)}"')

        for name, data in self.data.items():
            if data is None:
                data = ""
            dest.append(f' data-{name}="{escape(data)}"')
        return "".join(dest)

    def renderOpenTag(self) -> str:
        """
        renderOpenTag - return the opening tag with all attributes
        """
        return f"<{self.tagName}{self.renderAttributes()}>"

    def renderCloseTag(self) -> str:
        """
        renderCloseTag - return the closing tag, or "" for void elements
        """
        if self.isvoid:
            return ""
        return f"</{self.tagName}>"

    def render(self, append: str = "") -> str:
        """
        render - render this element to a string of html

        append: raw html output after the element's own content, before the
            closing tag. Ignored for void elements
        """
        dest = [self.renderOpenTag()]
        if not self.isvoid:
            content = self.html()
            if content is not None:
                dest.append(str(content))
            dest.append(str(append))
            dest.append(self.renderCloseTag())
        return "".join(dest)
