import logging

import pytest

from formbuilder.element import (
    Element,
    Flag,
    MalformedAttributeValue,
    Text,
    TokenSet,
    escape,
)


def test_set_and_get_attribute():
    e = Element("div")
    e.setAttribute("title", "hello world")
    assert e.getAttribute("title") == "hello world"
    assert e.getAttribute("missing") is None


def test_set_attribute_overwrites_in_place():
    e = Element("a", attributes={"href": "/one", "title": "t"})
    e.setAttribute("href", "/two")
    assert e.render() == '<a href="/two" title="t"></a>'


def test_bulk_set_attribute_keeps_order():
    e = Element("input")
    e.setAttribute({"type": "text", "name": "q", "maxlength": 10})
    assert e.getAttribute() == {"type": "text", "name": "q", "maxlength": "10"}
    assert e.render() == '<input type="text" name="q" maxlength="10">'


def test_attributes_from_pairs():
    e = Element("meta", attributes=[("name", "x"), ("content", "y")])
    assert e.render() == '<meta name="x" content="y">'


def test_flags():
    e = Element("input").required().disabled(False)
    assert e.render() == "<input required>"
    assert e.getAttribute("required") is True
    assert e.getAttribute("disabled") is False

    e.removeAttribute("required")
    assert e.render() == "<input>"


def test_flag_by_name_only():
    e = Element("option")
    e.setAttribute("selected")
    assert e.attributes["selected"] == Flag(True)
    assert e.render() == "<option selected></option>"


def test_none_removes_attribute():
    e = Element("div", attributes={"title": "x"})
    e.setAttribute("title", None)
    assert e.getAttribute("title") is None
    assert e.render() == "<div></div>"


def test_remove_missing_attribute_is_noop():
    e = Element("div")
    e.removeAttribute("nothing")
    assert e.getAttribute() == {}


def test_id_property():
    e = Element("div", id="main")
    assert e.id == "main"
    e.id = "other"
    assert e.render() == '<div id="other"></div>'


def test_add_class_deduplicates():
    e = Element("div")
    e.addClass("a b")
    e.addClass("b c")
    assert e.render() == '<div class="a b c"></div>'
    assert e.getAttribute("class") == "a b c"

    e.removeClass("b")
    assert e.render() == '<div class="a c"></div>'


def test_add_class_list():
    e = Element("div", classname="x")
    e.addClass(["y", "x", "z w"])
    assert e.attributes["class"] == TokenSet(("x", "y", "z", "w"))


def test_class_string_is_normalised():
    e = Element("div")
    e.setAttribute("class", "  a  b a ")
    assert e.attributes["class"] == TokenSet(("a", "b"))
    e.removeClass(["a", "nothere"])
    assert e.getAttribute("class") == "b"


def test_remove_class_without_class_is_noop():
    e = Element("div")
    e.removeClass("a")
    assert "class" not in e.attributes


def test_list_attribute_renders_joined():
    e = Element("div")
    e.setAttribute("aria-labelledby", ["one", "two"])
    assert e.getAttribute("aria-labelledby") == "one two"
    assert e.render() == '<div aria-labelledby="one two"></div>'


def test_attribute_escaping():
    e = Element("span")
    e.setAttribute("title", '<x> & "y"')
    assert e.renderOpenTag() == '<span title="&lt;x&gt; &amp; &quot;y&quot;">'
    # stored raw
    assert e.getAttribute("title") == '<x> & "y"'


def test_escape_quotes():
    assert escape("it's") == "it&#x27;s"
    assert escape(5) == "5"


def test_data_attributes():
    e = Element("div")
    e.setData("id", '5"')
    e.setData({"role": "x", "n": 3})
    assert e.getData("id") == '5"'
    assert e.getData() == {"id": '5"', "role": "x", "n": 3}
    assert e.render() == '<div data-id="5&quot;" data-role="x" data-n="3"></div>'


def test_data_after_attributes():
    e = Element("div")
    e.setData("a", "1")
    e.setAttribute("id", "z")
    assert e.renderOpenTag() == '<div id="z" data-a="1">'


def test_remove_data():
    e = Element("div")
    e.setData({"a": "1", "b": "2"})
    e.removeData("a")
    assert e.getData() == {"b": "2"}
    e.removeData("missing")
    e.removeData()
    assert e.getData() == {}
    assert e.render() == "<div></div>"


def test_content_is_raw():
    e = Element("p")
    e.html("<b>bold</b>")
    assert e.html() == "<b>bold</b>"
    assert e.render() == "<p><b>bold</b></p>"


def test_render_append():
    e = Element("p", content="a")
    assert e.render("<i>b</i>") == "<p>a<i>b</i></p>"


def test_void_element_ignores_content():
    e = Element("input", content="x")
    assert e.isvoid
    assert e.renderCloseTag() == ""
    assert e.render("ignored") == "<input>"


def test_explicit_void_flag_is_kept():
    assert Element("input", isvoid=False).render() == "<input></input>"
    assert Element("widget", isvoid=True).render("x") == "<widget>"


def test_tag_name_lowercased():
    assert Element("DIV").render() == "<div></div>"


def test_render_is_idempotent():
    e = Element("div", id="a", classname="b", content="c")
    e.setData("d", "e")
    assert e.render() == e.render()


def test_malformed_value_is_coerced(caplog):
    e = Element("div")
    with caplog.at_level(logging.DEBUG, logger="formbuilder.element"):
        e.setAttribute("title", {"a": 1})
    assert e.attributes["title"] == Text("{'a': 1}")
    assert "Converting dict value" in caplog.text


def test_malformed_value_strict():
    e = Element("div", strict=True)
    with pytest.raises(MalformedAttributeValue):
        e.setAttribute("title", object())
    assert e.getAttribute("title") is None


def test_token_set_parse():
    assert TokenSet.parse(None) == TokenSet()
    assert TokenSet.parse("a b  a").tokens == ("a", "b")
    assert TokenSet.parse(["a", 1, "b c"]).tokens == ("a", "1", "b", "c")


def test_add_class_non_string():
    e = Element("div")
    e.addClass(5)
    assert e.render() == '<div class="5"></div>'
    e.addClass([6, "a"])
    assert e.getAttribute("class") == "5 6 a"


def test_add_empty_class_without_class():
    e = Element("div")
    e.addClass(None)
    e.addClass("")
    assert e.render() == "<div></div>"


def test_non_string_content_renders():
    e = Element("p")
    e.html(5)
    assert e.html() == "5"
    assert e.render() == "<p>5</p>"
    assert Element("p", content=0).render() == "<p>0</p>"
