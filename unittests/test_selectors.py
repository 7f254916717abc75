#! /usr/bin/env python

import logging
import unittest

import xml.etree.ElementTree as etree

from cssdom.cascade import ElementTreeStylesheetApplier
from cssdom.errors import CSSError, CSSSyntaxError
from cssdom.selectors import (
    Selector, SelectorChain, parse_selector_chain, split_whitespace)


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(SelectorTests),
        loader.loadTestsFromTestCase(ChainTests),
    ))


DOC = """<html xmlns="http://www.w3.org/1999/xhtml">
<body>
    <div class="main">
        <p class="note">One</p>
        <p>Two <em>three</em></p>
        <!-- comment -->
    </div>
    <p class="other">Four</p>
    <h1>Five</h1>
</body>
</html>"""


class ElementTestCase(unittest.TestCase):

    def setUp(self):        # noqa
        self.root = etree.fromstring(DOC)
        self.access = ElementTreeStylesheetApplier()
        self.access.index_tree(self.root)
        self.elements = list(self.root.iter())
        self.elements = [e for e in self.elements if isinstance(e.tag, str)]

    def find(self, name):
        return [e for e in self.elements
                if self.access.get_local_name(e) == name]


class SelectorTests(ElementTestCase):

    def test_from_str(self):
        s = Selector.from_str("p.note")
        self.assertTrue(s.tag_name == "p")
        self.assertTrue(s.tag_class == "note")
        self.assertTrue(s.css_text == "p.note")
        s = Selector.from_str(".note")
        self.assertTrue(s.tag_name == "")
        self.assertTrue(s.tag_class == "note")
        self.assertTrue(str(s) == ".note")
        s = Selector.from_str("p")
        self.assertTrue(s.tag_class == "")
        self.assertTrue(s.getCssText() == "p")
        # split on the first '.' only
        s = Selector.from_str("p.a.b")
        self.assertTrue(s.tag_class == "a.b")
        self.assertTrue(Selector.from_str(".") is None)
        self.assertTrue(Selector.from_str("") is None)
        self.assertTrue(Selector("p", "x") == Selector.from_str("p.x"))

    def test_match_name(self):
        s = Selector("p")
        for e in self.elements:
            self.assertTrue(s.matches(e, self.access) ==
                            (self.access.get_local_name(e) == "p"))
        # names are case sensitive
        s = Selector("P")
        self.assertFalse(s.matches(self.find("p")[0], self.access))

    def test_match_class(self):
        note, plain = self.find("p")[:2]
        other = self.find("p")[2]
        s = Selector("", "note")
        self.assertTrue(s.matches(note, self.access))
        self.assertFalse(s.matches(plain, self.access))
        self.assertFalse(s.matches(other, self.access))
        s = Selector("div", "note")
        self.assertFalse(s.matches(note, self.access))
        s = Selector("p", "note")
        self.assertTrue(s.matches(note, self.access))
        self.assertTrue(s.matches(note, self.access, "p"))
        # a supplied local name is trusted
        self.assertFalse(s.matches(note, self.access, "div"))

    def test_split(self):
        self.assertTrue(split_whitespace(" div\t p\n.x ") ==
                        ["div", "p", ".x"])
        self.assertTrue(split_whitespace("\f") == [])


class ChainTests(ElementTestCase):

    def test_from_str(self):
        c = SelectorChain.from_str(" div  p.note ")
        self.assertTrue(len(c) == 2)
        self.assertTrue(c.selectors[0] == Selector("div"))
        self.assertTrue(c.selectors[1] == Selector("p", "note"))
        self.assertTrue(c.css_text == "div p.note")
        for bad in ("", "  ", "div . p"):
            try:
                SelectorChain.from_str(bad)
                self.fail("bad selector: %s" % repr(bad))
            except CSSSyntaxError:
                pass
        try:
            SelectorChain([])
            self.fail("empty chain")
        except CSSError:
            pass
        c = parse_selector_chain("ul li.x")
        self.assertTrue(c.css_text == "ul li.x")
        try:
            parse_selector_chain(".")
            self.fail("bad selector: .")
        except CSSSyntaxError:
            pass

    def test_simple_name(self):
        self.assertTrue(SelectorChain.from_str("p").is_simple_name())
        self.assertFalse(SelectorChain.from_str("p.x").is_simple_name())
        self.assertFalse(SelectorChain.from_str(".x").is_simple_name())
        self.assertFalse(SelectorChain.from_str("div p").is_simple_name())

    def test_fast_path_equivalence(self):
        names = set(self.access.get_local_name(e) for e in self.elements)
        names.update(("P", "table", "x"))
        for name in names:
            c = SelectorChain([Selector(name)])
            for e in self.elements:
                self.assertTrue(
                    c.matches(e, self.access) ==
                    c.match_ancestors(e, self.access), name)

    def test_descendant(self):
        c = SelectorChain.from_str("div p")
        ps = self.find("p")
        self.assertTrue(c.matches(ps[0], self.access))
        self.assertTrue(c.matches(ps[1], self.access))
        # not inside the div
        self.assertFalse(c.matches(ps[2], self.access))
        # the target must match the last selector
        self.assertFalse(c.matches(self.find("div")[0], self.access))

    def test_immediate_parent(self):
        # ancestors are matched by walking to the immediate parent
        em = self.find("em")[0]
        self.assertTrue(SelectorChain.from_str("p em").matches(
            em, self.access))
        self.assertTrue(SelectorChain.from_str("div p em").matches(
            em, self.access))
        self.assertFalse(SelectorChain.from_str("div em").matches(
            em, self.access))
        self.assertTrue(SelectorChain.from_str("div.main p").matches(
            self.find("p")[0], self.access))
        self.assertFalse(SelectorChain.from_str("div.other p").matches(
            self.find("p")[0], self.access))

    def test_no_parent(self):
        c = SelectorChain.from_str("body html")
        self.assertFalse(c.matches(self.root, self.access))
        c = SelectorChain.from_str("x html")
        self.assertFalse(c.matches(self.root, self.access))

    def test_standalone(self):
        # an element with no ancestor
        p = etree.Element("p")
        access = ElementTreeStylesheetApplier()
        access.index_tree(p)
        self.assertFalse(SelectorChain.from_str("div p").matches(p, access))
        self.assertTrue(SelectorChain.from_str("p").matches(p, access))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    unittest.main()
