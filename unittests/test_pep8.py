#! /usr/bin/env python

import logging
import unittest

from cssdom import pep8


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(FunctionTests),
        loader.loadTestsFromTestCase(CompatibilityTests),
    ))


class FunctionTests(unittest.TestCase):

    def test_make_attr_name(self):
        self.assertTrue(pep8.make_attr_name('name') == 'name')
        self.assertTrue(pep8.make_attr_name('aName') == 'a_name')
        self.assertTrue(pep8.make_attr_name('ABCName') == 'abc_name')
        self.assertTrue(pep8.make_attr_name('Name') == 'name')
        self.assertTrue(pep8.make_attr_name('cssText') == 'css_text')
        self.assertTrue(pep8.make_attr_name('getPropertyCSSValue') ==
                        'get_property_css_value')
        self.assertTrue(pep8.make_attr_name('_private') == '_private')
        self.assertTrue(pep8.make_attr_name('parentStyleSheet') ==
                        'parent_style_sheet')


class Node(pep8.DOMCompatibility):

    def __init__(self):
        self._text = ''
        self.node_value = 1

    def get_node_name(self):
        return "node"

    def get_css_text(self):
        return self._text

    def set_css_text(self, src):
        self._text = src.strip()

    css_text = property(get_css_text, set_css_text)


class CompatibilityTests(unittest.TestCase):

    def test_get(self):
        n = Node()
        self.assertTrue(n.getNodeName() == "node")
        self.assertTrue(n.nodeValue == 1)
        try:
            n.missingName
            self.fail("unknown camelCase name")
        except AttributeError:
            pass
        try:
            n.missing
            self.fail("unknown name")
        except AttributeError:
            pass

    def test_set_property(self):
        n = Node()
        n.cssText = " color: red "
        self.assertTrue(n.css_text == "color: red")
        self.assertTrue(n.cssText == "color: red")
        # camelCase names that aren't properties are set as-is
        n.newValue = 2
        self.assertTrue(n.__dict__['newValue'] == 2)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    unittest.main()
