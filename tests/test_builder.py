"""Tests for the element builder and content coercion."""

import pytest

from domsignal import (
    BoundText,
    Literal,
    Node,
    Reactive,
    UnsupportedContentError,
    attribute,
    bound_text,
    div,
    element,
    h1,
    new_document,
    p,
    serialize,
    signal,
    span,
    use_document,
)
from domsignal.content import as_content


class TestReactiveText:
    def test_initial_render(self):
        count = signal(5)
        el = h1()(count)
        text = el.firstChild
        assert isinstance(text, BoundText)
        assert text.data == "5"

    def test_write_updates_before_return(self):
        count = signal(5)
        el = h1()(count)
        count.write(7)
        assert el.firstChild.data == "7"

    def test_two_nodes_one_signal(self):
        count = signal(0)
        a = span()(count)
        b = span()(count)
        assert count.subscribers == (a.firstChild.binding, b.firstChild.binding)
        count.write(3)
        assert (a.firstChild.data, b.firstChild.data) == ("3", "3")

    def test_custom_format(self):
        seconds = signal(1.5)
        el = p()(Reactive(seconds, lambda v: f"{v:.2f}s"))
        assert el.firstChild.data == "1.50s"
        seconds.write(2)
        assert el.firstChild.data == "2.00s"

    def test_none_renders_empty(self):
        value = signal(None)
        el = span()(value)
        assert el.firstChild.data == ""
        value.write(0)
        assert el.firstChild.data == "0"
        value.write(None)
        assert serialize(el) == "<span></span>"

    def test_bound_text_reads_several_signals(self):
        first = signal("Ada")
        last = signal("Lovelace")
        node = bound_text(lambda: f"{first.read()} {last.read()}")
        el = div()(node)
        last.write("Byron")
        assert el.firstChild.data == "Ada Byron"
        assert node.binding.dependencies == (first, last)


class TestComposition:
    def test_app_tree(self):
        counter = signal(0)
        app = div({"class": "App"})(h1()(counter), p()("text"))
        assert app.tagName == "div"
        assert app.getAttribute("class") == "App"
        assert [c.tagName for c in app.childNodes] == ["h1", "p"]
        assert serialize(app) == '<div class="App"><h1>0</h1><p>text</p></div>'
        counter.write(12)
        assert serialize(app) == '<div class="App"><h1>12</h1><p>text</p></div>'

    def test_children_keep_order(self):
        s = signal("b")
        el = p()("a", s, "c", span()("d"))
        assert serialize(el) == "<p>abc<span>d</span></p>"

    def test_literal_is_never_updated(self):
        s = signal("x")
        el = p()("static", s)
        s.write("y")
        assert el.firstChild.data == "static"
        assert not isinstance(el.firstChild, BoundText)

    def test_no_attrs(self):
        el = div()("hi")
        assert not el.hasAttributes()

    def test_several_attrs(self):
        el = div({"id": "root", "class": "App"})()
        assert el.getAttribute("id") == "root"
        assert el.getAttribute("class") == "App"
        assert len(el.childNodes) == 0

    def test_custom_tag(self):
        a = attribute(element("a"))
        el = a({"href": "/"})("home")
        assert serialize(el) == '<a href="/">home</a>'

    def test_plain_element_constructor(self):
        el = element("section")("body")
        assert serialize(el) == "<section>body</section>"

    def test_explicit_variants(self):
        inner = span()("x")
        el = div()(Literal("a"), Node(inner), Reactive(signal(1)))
        assert serialize(el) == "<div>a<span>x</span>1</div>"


class TestDocument:
    def test_builds_in_default_document(self):
        doc = new_document()
        with use_document(doc):
            el = div()("x")
        assert el.ownerDocument is doc

    def test_explicit_document(self):
        doc = new_document()
        el = element("div", document=doc)(signal(1))
        assert el.ownerDocument is doc
        assert el.firstChild.ownerDocument is doc


class TestContentErrors:
    def test_unsupported_content(self):
        with pytest.raises(UnsupportedContentError, match="unsupported content type int"):
            div()(42)

    def test_fails_before_building(self):
        s = signal(1)
        with pytest.raises(UnsupportedContentError):
            div()(s, object())
        # the Signal before the bad argument was never bound
        assert s.subscribers == ()

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            p()(None)

    def test_non_string_attribute(self):
        with pytest.raises(UnsupportedContentError, match="attribute 'tabindex'"):
            div({"tabindex": 1})

    def test_as_content(self):
        s = signal(1)
        el = span()()
        assert as_content("t") == Literal("t")
        assert as_content(s) == Reactive(s)
        assert as_content(el) == Node(el)
        assert as_content(Literal("t")) == Literal("t")
