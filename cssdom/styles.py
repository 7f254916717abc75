#! /usr/bin/env python
"""Style declarations: the property/value pairs of a rule"""

from .pep8 import DOMCompatibility
from .selectors import split_whitespace
from .values import CSSValue, PrimitiveValue, parse_value


IMPORTANT = "important"


def split_priority(src):
    """Splits a trailing !important from the text of a value

    Returns a tuple of (value text, priority).  The value text is
    trimmed, priority is either "important" or the empty string."""
    src = src.strip()
    bang = src.rfind('!')
    if bang >= 0 and src[bang + 1:].strip().lower() == IMPORTANT:
        return src[:bang].strip(), IMPORTANT
    return src, ''


def _css_property(name, doc=None):
    return property(lambda self: self.get_property_value(name),
                    lambda self, value: self.set_property(name, value),
                    lambda self: self.remove_property(name),
                    doc or "The %s property" % name)


class StyleDeclaration(DOMCompatibility):

    """A set of CSS property values

    parent_rule
        The rule that owns this declaration, None for inline styles and
        for the resolved styles of elements.

    Each property name is unique, setting a property that is already
    present replaces its value.  Insertion order is kept and used when
    the declaration is converted back to text.  The property values are
    not directly accessible as a dictionary as setting some properties
    (background) expands them into other properties.

    Declarations support len, iteration (over property names) and the
    in operator."""

    def __init__(self, parent_rule=None):
        self._properties = {}
        self.parent_rule = parent_rule

    @classmethod
    def from_str(cls, src):
        """Parses inline style text, e.g., from a style attribute"""
        result = cls()
        result.set_css_text(src)
        return result

    def get_css_text(self):
        result = []
        for name, value in self._properties.items():
            if value.priority:
                result.append("%s: %s !%s;\n" % (
                    name, value.get_css_text(), value.priority))
            else:
                result.append("%s: %s;\n" % (name, value.get_css_text()))
        return ''.join(result)

    def set_css_text(self, src):
        """Replaces all properties with those parsed from *src*

        src is parsed as inline style text, see
        :func:`cssdom.parser.parse_style_declaration`."""
        from .parser import CSSParser
        self._properties.clear()
        CSSParser(src).require_declaration_block(self, inline=True)

    css_text = property(get_css_text, set_css_text)

    @property
    def length(self):
        return len(self._properties)

    def item(self, index):
        """Returns the name of the property at *index*

        Returns the empty string if index is out of range."""
        if 0 <= index < len(self._properties):
            return list(self._properties.keys())[index]
        else:
            return ""

    def __len__(self):
        return len(self._properties)

    def __iter__(self):
        return iter(list(self._properties.keys()))

    def __contains__(self, name):
        return name in self._properties

    def get_property_value(self, name):
        """Returns the text of a property's value

        Returns the empty string if the property is not set."""
        value = self._properties.get(name, None)
        if value is None:
            return ""
        else:
            return value.get_css_text()

    def get_property_css_value(self, name):
        """Returns the :class:`cssdom.values.CSSValue` of a property

        Returns None if the property is not set."""
        return self._properties.get(name, None)

    def get_property_priority(self, name):
        """Returns "important" or the empty string"""
        value = self._properties.get(name, None)
        if value is None:
            return ""
        else:
            return value.priority

    def set_property(self, name, value, priority=''):
        """Sets a property

        name
            The property name, names are case sensitive.

        value
            Either the text of the value or a
            :class:`cssdom.values.CSSValue` instance, which is copied.  A
            text value may end with !important.  Setting a property to an empty string
            removes it.

        priority
            "important" or the empty string.

        The text of list properties (font-family and text-decoration) is
        parsed as a :class:`cssdom.values.ValueList`.  The background
        shorthand is not stored, any colors it contains are used to set
        background-color."""
        if isinstance(value, CSSValue):
            if name == 'background':
                self.set_background(value.get_css_text(),
                                    priority or value.priority)
                return
            value = value.copy()
            if priority:
                value.priority = priority
            self._properties[name] = value
            return
        value, important = split_priority(value)
        priority = priority or important
        if not value:
            self.remove_property(name)
        elif name == 'background':
            self.set_background(value, priority)
        else:
            css_value = parse_value(name, value)
            css_value.priority = priority
            self._properties[name] = css_value

    def set_background(self, src, priority=''):
        """Expands the background shorthand

        Only the color part of the shorthand is used, other tokens are
        parsed but ignored."""
        for token in split_whitespace(src):
            if PrimitiveValue.from_str(token).is_color():
                self.set_property('background-color', token, priority)

    def remove_property(self, name):
        """Removes a property

        Returns the text of the value removed or the empty string if
        the property was not set."""
        value = self._properties.pop(name, None)
        if value is None:
            return ""
        else:
            return value.get_css_text()

    def import_style(self, other):
        """Merges the properties of *other* into this declaration

        Properties set in other replace those with the same name in this
        declaration.  The values are copied so later changes to either
        declaration do not affect the other."""
        for name in other:
            self._properties[name] = other.get_property_css_value(name).copy()

    color = _css_property('color')
    background_color = _css_property('background-color')
    display = _css_property('display')
    font_family = _css_property('font-family')
    font_size = _css_property('font-size')
    font_style = _css_property('font-style')
    font_weight = _css_property('font-weight')
    line_height = _css_property('line-height')
    list_style_type = _css_property('list-style-type')
    margin_top = _css_property('margin-top')
    margin_right = _css_property('margin-right')
    margin_bottom = _css_property('margin-bottom')
    margin_left = _css_property('margin-left')
    page_break_after = _css_property('page-break-after')
    page_break_before = _css_property('page-break-before')
    text_indent = _css_property('text-indent')
    text_transform = _css_property('text-transform')
    vertical_align = _css_property('vertical-align')

    def is_display_inline(self):
        """True if the display property is unset or inline"""
        display = self.get_property_value('display')
        return not display or display == 'inline'

    def __str__(self):
        return self.get_css_text()

    def __repr__(self):
        return "StyleDeclaration(%s)" % repr(self.get_css_text())
