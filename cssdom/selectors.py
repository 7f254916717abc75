#! /usr/bin/env python
"""Simple selectors and descendant selector chains"""

from .errors import CSSError, CSSSyntaxError
from .pep8 import DOMCompatibility
from .scanner import CSS_WHITESPACE
from .xhtml import CLASS_ATTR


class ElementAccess(object):

    """Abstract interface to an element tree

    Selectors do not depend on any particular tree implementation, all
    access to elements is through an instance of this class.  The style
    appliers in :mod:`cssdom.cascade` implement it."""

    def get_local_name(self, element):
        """Returns the local name of *element*"""
        raise NotImplementedError

    def get_namespace(self, element):
        """Returns the namespace URI of *element* or None"""
        raise NotImplementedError

    def get_attribute_value(self, element, ns, name):
        """Returns the value of an attribute or None if not present

        ns
            The namespace of the attribute, None for attributes with no
            namespace (such as class and style)."""
        raise NotImplementedError

    def get_parent_element(self, element):
        """Returns the parent element of *element* or None"""
        raise NotImplementedError

    def get_child_elements(self, element):
        """Returns an iterable of the child elements of *element*

        Children must be returned in document order."""
        raise NotImplementedError


class Selector(DOMCompatibility):

    """A simple selector

    tag_name
        The element name to match or the empty string to match any
        element.

    tag_class
        The class to match or the empty string to match any class.

    The class matches the element's class attribute value exactly, an
    element with several space separated classes does not match a
    selector that names just one of them."""

    def __init__(self, tag_name='', tag_class=''):
        self.tag_name = tag_name
        self.tag_class = tag_class

    @classmethod
    def from_str(cls, src):
        """Creates a selector from a token such as "p.note"

        The token is split on the first '.'.  Returns None if neither
        the name nor the class is present."""
        name, dot, tag_class = src.partition('.')
        name = name.strip()
        tag_class = tag_class.strip()
        if not name and not tag_class:
            return None
        return cls(name, tag_class)

    def matches(self, element, access, local_name=None):
        """True if this selector applies to *element*

        access
            An :class:`ElementAccess` instance

        local_name
            Optional local name of element if already known"""
        if self.tag_name:
            if local_name is None:
                local_name = access.get_local_name(element)
            if self.tag_name != local_name:
                return False
        if self.tag_class:
            if access.get_attribute_value(element, None, CLASS_ATTR) != \
                    self.tag_class:
                return False
        return True

    def get_css_text(self):
        if self.tag_class:
            return "%s.%s" % (self.tag_name, self.tag_class)
        else:
            return self.tag_name

    css_text = property(get_css_text)

    def __str__(self):
        return self.get_css_text()

    def __repr__(self):
        return "Selector(%s, %s)" % (repr(self.tag_name),
                                     repr(self.tag_class))

    def __eq__(self, other):
        if isinstance(other, Selector):
            return (self.tag_name, self.tag_class) == \
                (other.tag_name, other.tag_class)
        return NotImplemented

    def __hash__(self):
        return hash((self.tag_name, self.tag_class))


class SelectorChain(DOMCompatibility):

    """A descendant selector chain, e.g., "div p.note"

    selectors
        A non-empty list of :class:`Selector` instances in source
        order: the outermost ancestor first and the target element
        last."""

    def __init__(self, selectors):
        self.selectors = list(selectors)
        if not self.selectors:
            raise CSSError("selector chain must not be empty")

    @classmethod
    def from_str(cls, src):
        """Creates a chain from the text of a selector

        Raises :class:`CSSSyntaxError` if a token has neither a name
        nor a class or if there are no tokens at all."""
        selectors = []
        for token in split_whitespace(src):
            selector = Selector.from_str(token)
            if selector is None:
                raise CSSSyntaxError("tag name or class in selector")
            selectors.append(selector)
        if not selectors:
            raise CSSSyntaxError("selector")
        return cls(selectors)

    def is_simple_name(self):
        """True if this chain is just a single element name"""
        return (len(self.selectors) == 1 and
                bool(self.selectors[0].tag_name) and
                not self.selectors[0].tag_class)

    def matches(self, element, access, local_name=None):
        """True if this chain applies to *element*

        Single element-name chains are tested by comparing the local
        name directly, other chains are passed to
        :meth:`match_ancestors`."""
        if self.is_simple_name():
            if local_name is None:
                local_name = access.get_local_name(element)
            return self.selectors[0].tag_name == local_name
        return self.match_ancestors(element, access, local_name)

    def match_ancestors(self, element, access, local_name=None):
        """Matches this chain by walking up the element tree

        The last selector is tested against element itself, each
        preceding selector is then tested against the next parent in
        turn.  If an element has no parent when selectors remain to be
        tested the match fails."""
        i = len(self.selectors) - 1
        while True:
            if not self.selectors[i].matches(element, access, local_name):
                return False
            i -= 1
            if i < 0:
                return True
            element = access.get_parent_element(element)
            if element is None:
                return False
            local_name = None

    def get_css_text(self):
        return ' '.join(s.get_css_text() for s in self.selectors)

    css_text = property(get_css_text)

    def __str__(self):
        return self.get_css_text()

    def __len__(self):
        return len(self.selectors)

    def __iter__(self):
        return iter(self.selectors)


def parse_selector_chain(src):
    """Parses the text of a single selector, e.g., "div p.note"

    Returns a :class:`SelectorChain`, raises :class:`CSSSyntaxError` if
    the text is not a valid chain."""
    return SelectorChain.from_str(src)


def split_whitespace(src):
    """Splits src on CSS white space"""
    result = []
    token = []
    for c in src:
        if c in CSS_WHITESPACE:
            if token:
                result.append(''.join(token))
                token = []
        else:
            token.append(c)
    if token:
        result.append(''.join(token))
    return result
