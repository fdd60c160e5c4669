"""
inputs - form controls that carry a value, a validity state and an error

An Input is an Element plus a bound value. Where that value lives in the
markup (the value attribute, or the element's content) is decided by a
value accessor, and what makes it valid by a list of validators, so a
variant such as Color or Textarea is only a choice of tag, accessor and
validators.
"""
from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional, Union
import logging
import re

from .element import AttributeSource, Element, escape

logger = logging.getLogger(__name__)

# a validator returns an error message, or None when the value is fine
Validator = Callable[["Input", Any], Optional[str]]

COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class ValueAttribute:
    """
    Value held in the value attribute. Content is raw html
    """

    def get(self, element: Element) -> Any:
        return element.getAttribute("value")

    def set(self, element: Element, value: Any) -> None:
        element.setAttribute("value", value)

    def html(self, element: Element) -> Optional[str]:
        return element.content


class TextContent:
    """
    Value held as the element's content, which is text rather than markup:
    the content is stored raw and escaped when read through html()
    """

    def get(self, element: Element) -> Any:
        return element.content

    def set(self, element: Element, value: Any) -> None:
        element.content = None if value is None else str(value)

    def html(self, element: Element) -> Optional[str]:
        if element.content is None:
            return None
        return escape(element.content)


def isempty(value: Any) -> bool:
    return value is None or value == "" or value == []


def checkrequired(element: Input, value: Any) -> Optional[str]:
    """
    checkrequired - fails when the input has a required attribute (other
        than required=False) and no value
    """
    if element.getAttribute("required") not in (None, False) and isempty(value):
        return "This value is required"
    return None


def checkcolor(element: Input, value: Any) -> Optional[str]:
    """
    checkcolor - value must be a #RRGGBB hex color
    """
    if isempty(value) or COLOR_RE.match(str(value)):
        return None
    return "This value is not a valid color"


class Label(Element):
    """
    A label element for an input. Its text is escaped when set. A label
    owned by an input renders "for" from the input's id at render time,
    unless "for" was set explicitly
    """

    def __init__(
        self,
        text: Optional[str] = None,
        for_: Optional[str] = None,
        control: Optional[Element] = None,
    ):
        super().__init__("label", isvoid=False)
        self.control = control
        if for_:
            self.setAttribute("for", for_)
        if text is not None:
            self.html(escape(text))

    def renderAttributes(self) -> str:
        attrs = super().renderAttributes()
        if self.control is None or "for" in self.attributes:
            return attrs
        id = self.control.id
        if not id:
            return attrs
        return f' for="{escape(id)}"' + attrs


class Input(Element):
    """
    A form control bound to a value
    """

    def __init__(
        self,
        tagName: str = "input",
        attributes: Optional[AttributeSource] = None,
        accessor: Optional[Union[ValueAttribute, TextContent]] = None,
        validators: Optional[Iterable[Validator]] = None,
        isvoid: Optional[bool] = None,
    ):
        """
        tagName: tag of the control
        attributes: initial attributes, set in order
        accessor: where the value lives, defaults to the value attribute
        validators: checks run by isValid() after the required check
        isvoid: see Element
        """
        super().__init__(tagName, attributes=attributes, isvoid=isvoid)
        self.accessor = accessor or ValueAttribute()
        self.validators: List[Validator] = [checkrequired]
        if validators:
            self.validators.extend(validators)
        self.label: Optional[Label] = None
        self._error: Optional[str] = None

    def val(self, value: Any = None) -> Any:
        """
        val - get (no argument) or set the value of this input
        """
        if value is None:
            return self.accessor.get(self)
        self.accessor.set(self, value)
        return self

    def html(self, content: Optional[str] = None) -> Any:
        """
        html - get or set the content. The getter goes through the value
            accessor (and may escape), the setter stores the string as is
        """
        if content is None:
            return self.accessor.html(self)
        self.content = str(content)
        return self

    def load(self, value: Any = None, file: Any = None) -> Input:
        """
        load - bind a submitted value (eg from a request). file is the
            uploaded file for file inputs, ignored by other inputs
        """
        if value is None:
            value = ""
        self.accessor.set(self, value)
        return self

    def error(self, message: Optional[str] = None) -> Any:
        """
        error - get (no argument) or set the error message
        """
        if message is None:
            return self._error
        self._error = message
        return self

    def isValid(self) -> bool:
        """
        isValid - run the validators against the current value. The first
            failure is stored as the error message
        """
        value = self.val()
        for validator in self.validators:
            message = validator(self, value)
            if message is not None:
                logger.debug("%s is invalid: %s", self.tagName, message)
                self._error = message
                return False
        self._error = None
        return True

    def setLabel(self, text: str) -> Input:
        """
        setLabel - create (or replace the text of) the label of this input.
            The label points at the input's id, as it is when the label is
            rendered
        """
        if self.label is None:
            self.label = Label(control=self)
        self.label.html(escape(text))
        return self


class Color(Input):
    """
    input[type="color"]
    """

    def __init__(
        self,
        label: Optional[str] = None,
        attributes: Optional[AttributeSource] = None,
    ):
        super().__init__("input", validators=[checkcolor])
        self.setAttribute("type", "color")
        if attributes:
            self.setAttribute(attributes)
        if label is not None:
            self.setLabel(label)


class Textarea(Input):
    """
    textarea, whose value is its (text) content
    """

    def __init__(
        self,
        label: Optional[str] = None,
        attributes: Optional[AttributeSource] = None,
    ):
        super().__init__(
            "textarea", attributes=attributes, accessor=TextContent(), isvoid=False
        )
        if label is not None:
            self.setLabel(label)
