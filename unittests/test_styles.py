#! /usr/bin/env python

import logging
import unittest

from cssdom import styles
from cssdom.values import PrimitiveType, PrimitiveValue, ValueList


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(DeclarationTests),
        loader.loadTestsFromTestCase(ShorthandTests),
        loader.loadTestsFromTestCase(ImportTests),
        loader.loadTestsFromTestCase(PropertiesTests),
    ))


class DeclarationTests(unittest.TestCase):

    def test_empty(self):
        s = styles.StyleDeclaration()
        self.assertTrue(len(s) == 0)
        self.assertTrue(s.length == 0)
        self.assertTrue(s.item(0) == "")
        self.assertTrue(s.get_property_value("color") == "")
        self.assertTrue(s.get_property_css_value("color") is None)
        self.assertTrue(s.get_property_priority("color") == "")
        self.assertTrue(s.remove_property("color") == "")
        self.assertTrue(s.css_text == "")
        self.assertTrue(s.parent_rule is None)

    def test_set(self):
        s = styles.StyleDeclaration()
        s.set_property("color", " red ")
        s.set_property("font-size", "12pt")
        self.assertTrue(len(s) == 2)
        self.assertTrue("color" in s)
        self.assertFalse("Color" in s)
        self.assertTrue(list(s) == ["color", "font-size"])
        self.assertTrue(s.item(0) == "color")
        self.assertTrue(s.item(1) == "font-size")
        self.assertTrue(s.item(2) == "")
        self.assertTrue(s.item(-1) == "")
        self.assertTrue(s.get_property_value("color") == "red")
        v = s.get_property_css_value("font-size")
        self.assertTrue(isinstance(v, PrimitiveValue))
        self.assertTrue(v.primitive_type == PrimitiveType.PT)
        # last set wins, order is unchanged
        s.set_property("color", "blue")
        self.assertTrue(s.get_property_value("color") == "blue")
        self.assertTrue(s.css_text == "color: blue;\nfont-size: 12pt;\n",
                        repr(s.css_text))
        # setting an empty value removes the property
        s.set_property("color", "  ")
        self.assertFalse("color" in s)

    def test_lists(self):
        s = styles.StyleDeclaration()
        s.set_property("font-family", "Arial, sans-serif")
        v = s.get_property_css_value("font-family")
        self.assertTrue(isinstance(v, ValueList))
        self.assertTrue(len(v) == 2)
        self.assertTrue(s.get_property_value("font-family") ==
                        "Arial, sans-serif")
        s.set_property("text-decoration", "underline")
        self.assertTrue(isinstance(s.get_property_css_value(
            "text-decoration"), ValueList))

    def test_priority(self):
        s = styles.StyleDeclaration()
        s.set_property("color", "red !important")
        self.assertTrue(s.get_property_value("color") == "red")
        self.assertTrue(s.get_property_priority("color") == "important")
        s.set_property("margin-top", "1em ! IMPORTANT")
        self.assertTrue(s.get_property_priority("margin-top") == "important")
        s.set_property("color", "blue", "important")
        self.assertTrue(s.get_property_priority("color") == "important")
        s.set_property("color", "blue")
        self.assertTrue(s.get_property_priority("color") == "")
        s.set_property("content", "'!'")
        self.assertTrue(s.get_property_value("content") == '"!"')
        self.assertTrue(s.get_property_priority("content") == "")
        self.assertTrue(styles.split_priority(" a ! important ") ==
                        ("a", "important"))
        self.assertTrue(styles.split_priority("a!") == ("a!", ""))

    def test_css_text(self):
        s = styles.StyleDeclaration()
        s.set_property("color", "red", "important")
        self.assertTrue(s.css_text == "color: red !important;\n")
        s.css_text = "font-weight: bold; margin-left: 2em"
        self.assertTrue(len(s) == 2)
        self.assertTrue(s.get_property_value("font-weight") == "bold")
        self.assertTrue(s.get_property_value("margin-left") == "2em")
        s.cssText = "color: green"
        self.assertTrue(s.getPropertyValue("color") == "green")
        self.assertTrue(s.length == 1)
        s = styles.StyleDeclaration.from_str("color: red; display")
        self.assertTrue(s.get_property_value("color") == "red")
        self.assertFalse("display" in s)

    def test_set_value_object(self):
        s = styles.StyleDeclaration()
        v = PrimitiveValue.from_str("10px")
        s.set_property("width", v, "important")
        stored = s.get_property_css_value("width")
        self.assertFalse(stored is v)
        self.assertTrue(stored.priority == "important")
        self.assertTrue(s.get_property_value("width") == "10px")
        # the caller's value is unchanged
        self.assertTrue(v.priority == "")
        v.css_text = "20px"
        self.assertTrue(s.get_property_value("width") == "10px")

    def test_remove(self):
        s = styles.StyleDeclaration.from_str("color: red; display: block")
        self.assertTrue(s.remove_property("color") == "red")
        self.assertTrue(list(s) == ["display"])
        self.assertTrue(s.removeProperty("display") == "block")
        self.assertTrue(len(s) == 0)


class ShorthandTests(unittest.TestCase):

    def test_named_color(self):
        s = styles.StyleDeclaration()
        s.set_property("background", "red")
        self.assertTrue(s.get_property_value("background-color") == "red")
        self.assertFalse("background" in s)

    def test_hex_color(self):
        s = styles.StyleDeclaration()
        s.set_property("background", "#ff0000")
        v = s.get_property_css_value("background-color")
        self.assertTrue(v.get_rgb_color_value() == "red")
        named = styles.StyleDeclaration()
        named.set_property("background", "red")
        self.assertTrue(
            named.get_property_css_value(
                "background-color").get_rgb_color_value() ==
            v.get_rgb_color_value())

    def test_no_color(self):
        s = styles.StyleDeclaration()
        s.set_property("background", "url(x.png)")
        self.assertTrue(s.get_property_value("background-color") == "")
        self.assertTrue(len(s) == 0)

    def test_mixed(self):
        s = styles.StyleDeclaration()
        s.set_property("background", "url(x.png) no-repeat #00f top")
        self.assertTrue(s.get_property_value("background-color") ==
                        "#0000FF")
        self.assertTrue(len(s) == 1)
        s.set_property("background", "white !important")
        self.assertTrue(
            s.get_property_priority("background-color") == "important")

    def test_value_object(self):
        s = styles.StyleDeclaration()
        s.set_property("background", PrimitiveValue.from_str("red"))
        self.assertFalse("background" in s)
        self.assertTrue(s.get_property_value("background-color") == "red")
        v = PrimitiveValue.from_str("#00f")
        v.priority = "important"
        s.set_property("background", v)
        self.assertTrue(s.get_property_value("background-color") ==
                        "#0000FF")
        self.assertTrue(
            s.get_property_priority("background-color") == "important")
        s.set_property("background", ValueList.from_str("url(x.png) navy"))
        self.assertTrue(s.get_property_value("background-color") == "navy")
        self.assertTrue(len(s) == 1)


class ImportTests(unittest.TestCase):

    def test_import(self):
        s = styles.StyleDeclaration.from_str("color: red; margin-top: 1em")
        other = styles.StyleDeclaration.from_str(
            "color: blue; display: block")
        s.import_style(other)
        self.assertTrue(s.get_property_value("color") == "blue")
        self.assertTrue(s.get_property_value("margin-top") == "1em")
        self.assertTrue(s.get_property_value("display") == "block")
        # other is unchanged
        self.assertTrue(len(other) == 2)

    def test_import_copies(self):
        s = styles.StyleDeclaration()
        other = styles.StyleDeclaration.from_str(
            "color: red; font-family: a, b")
        s.import_style(other)
        self.assertFalse(s.get_property_css_value("color") is
                         other.get_property_css_value("color"))
        s.get_property_css_value("color").css_text = "blue"
        s.get_property_css_value("font-family")[0].css_text = "c"
        self.assertTrue(other.get_property_value("color") == "red")
        self.assertTrue(other.get_property_value("font-family") == "a, b")
        self.assertTrue(s.get_property_value("font-family") == "c, b")

    def test_idempotent(self):
        other = styles.StyleDeclaration.from_str(
            "color: blue; font-family: a, b; display: block")
        once = styles.StyleDeclaration.from_str("color: red; top: 0")
        once.import_style(other)
        twice = styles.StyleDeclaration.from_str("color: red; top: 0")
        twice.import_style(other)
        twice.import_style(other)
        self.assertTrue(once.css_text == twice.css_text)
        for name in once:
            self.assertTrue(once.get_property_value(name) ==
                            twice.get_property_value(name))


class PropertiesTests(unittest.TestCase):

    def test_accessors(self):
        s = styles.StyleDeclaration()
        self.assertTrue(s.color == "")
        s.color = "red"
        self.assertTrue(s.get_property_value("color") == "red")
        s.font_family = "serif"
        self.assertTrue(s.fontFamily == "serif")
        s.fontSize = "12pt"
        self.assertTrue(s.get_property_value("font-size") == "12pt")
        s.margin_left = "1em"
        s.text_indent = "2em"
        s.vertical_align = "super"
        s.list_style_type = "disc"
        s.page_break_before = "always"
        self.assertTrue(s.get_property_value("margin-left") == "1em")
        self.assertTrue(s.get_property_value("page-break-before") ==
                        "always")
        del s.color
        self.assertFalse("color" in s)

    def test_display_inline(self):
        s = styles.StyleDeclaration()
        self.assertTrue(s.is_display_inline())
        s.display = "inline"
        self.assertTrue(s.is_display_inline())
        s.display = "block"
        self.assertFalse(s.isDisplayInline())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    unittest.main()
