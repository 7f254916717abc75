#! /usr/bin/env python
"""CSS value model

Values are either a :class:`PrimitiveValue` (a keyword, length, number,
string, URI or colour) or a :class:`ValueList` of primitives.  Both
carry a priority which is either the empty string or "important"."""

import math

from .enumeration import Enumeration
from .errors import CSSError
from .pep8 import DOMCompatibility
from .scanner import BasicParser, CSS_WHITESPACE


class ValueType(Enumeration):

    """Enumerates the kinds of CSS value::

        ValueType.PRIMITIVE_VALUE == 1"""

    decode = {
        'INHERIT': 0,
        'PRIMITIVE_VALUE': 1,
        'VALUE_LIST': 2,
        'CUSTOM': 3}


class PrimitiveType(Enumeration):

    """Enumerates the types of primitive value

    The integer values are the unit type codes defined by DOM Level 2
    Style."""

    decode = {
        'UNKNOWN': 0,
        'NUMBER': 1,
        'PERCENTAGE': 2,
        'EMS': 3,
        'EXS': 4,
        'PX': 5,
        'CM': 6,
        'MM': 7,
        'IN': 8,
        'PT': 9,
        'PC': 10,
        'DEG': 11,
        'RAD': 12,
        'GRAD': 13,
        'MS': 14,
        'S': 15,
        'HZ': 16,
        'KHZ': 17,
        'DIMENSION': 18,
        'STRING': 19,
        'URI': 20,
        'IDENT': 21,
        'ATTR': 22,
        'COUNTER': 23,
        'RECT': 24,
        'RGBCOLOR': 25}

    aliases = {
        None: 'UNKNOWN'}


#: maps a lower-cased unit suffix on to its primitive type
UNIT_TYPES = {
    '%': PrimitiveType.PERCENTAGE,
    'em': PrimitiveType.EMS,
    'ex': PrimitiveType.EXS,
    'px': PrimitiveType.PX,
    'cm': PrimitiveType.CM,
    'mm': PrimitiveType.MM,
    'in': PrimitiveType.IN,
    'pt': PrimitiveType.PT,
    'pc': PrimitiveType.PC,
    'deg': PrimitiveType.DEG,
    'rad': PrimitiveType.RAD,
    'grad': PrimitiveType.GRAD,
    'ms': PrimitiveType.MS,
    's': PrimitiveType.S,
    'hz': PrimitiveType.HZ,
    'khz': PrimitiveType.KHZ}

#: the canonical unit suffix for each unit type
UNIT_SUFFIXES = dict((v, k) for k, v in UNIT_TYPES.items())
UNIT_SUFFIXES[PrimitiveType.HZ] = 'Hz'
UNIT_SUFFIXES[PrimitiveType.KHZ] = 'kHz'
UNIT_SUFFIXES[PrimitiveType.NUMBER] = ''

#: the primitive types that hold a float
FLOAT_TYPES = frozenset(
    list(UNIT_TYPES.values()) +
    [PrimitiveType.NUMBER, PrimitiveType.DIMENSION])

#: the primitive types that hold a string
STRING_TYPES = frozenset((
    PrimitiveType.STRING,
    PrimitiveType.URI,
    PrimitiveType.IDENT,
    PrimitiveType.ATTR,
    PrimitiveType.UNKNOWN))

#: properties whose values are always parsed as a list
LIST_PROPERTIES = frozenset((
    'font-family',
    'text-decoration'))

QUOTES = "\"'"


class RGBColor(object):

    """Class to represent a color value

    Instances can be created using either a string or a 3-tuple of sRGB
    values.  The string is either in the #RRGGBB or #RGB hex format or
    it is one of the 16 widely known color names which are matched case
    insensitively.  The canonical representation used when converting
    back to a character string is the #RRGGBB form in upper case.

    RGBColor instances can be compared for equality with each other and
    with character strings and are hashable but are not sortable.

    ValueError is raised if a string can't be interpreted as a
    color."""

    known_colors = {
        "black": (0x00, 0x00, 0x00),
        "green": (0x00, 0x80, 0x00),
        "silver": (0xC0, 0xC0, 0xC0),
        "lime": (0x00, 0xFF, 0x00),
        "gray": (0x80, 0x80, 0x80),
        "olive": (0x80, 0x80, 0x00),
        "white": (0xFF, 0xFF, 0xFF),
        "yellow": (0xFF, 0xFF, 0x00),
        "maroon": (0x80, 0x00, 0x00),
        "navy": (0x00, 0x00, 0x80),
        "red": (0xFF, 0x00, 0x00),
        "blue": (0x00, 0x00, 0xFF),
        "purple": (0x80, 0x00, 0x80),
        "teal": (0x00, 0x80, 0x80),
        "fuchsia": (0xFF, 0x00, 0xFF),
        "aqua": (0x00, 0xFF, 0xFF)}

    def __init__(self, src):
        if isinstance(src, str):
            src = src.strip().lower()
            if src in self.known_colors:
                self.r, self.g, self.b = self.known_colors[src]
            else:
                p = BasicParser(src)
                p.require('#', 'color')
                hex_digits = p.require_production(
                    p.parse_hex_digits(3, 6), "hex digits")
                p.require_end('color')
                if len(hex_digits) == 3:
                    hex_digits = ''.join(c + c for c in hex_digits)
                elif len(hex_digits) != 6:
                    raise ValueError("Bad color: #%s" % hex_digits)
                rgb = int(hex_digits, 16)
                self.r = (rgb & 0xFF0000) >> 16
                self.g = (rgb & 0xFF00) >> 8
                self.b = rgb & 0xFF
        elif isinstance(src, tuple):
            self.r, self.g, self.b = src
        else:
            raise ValueError(repr(src))

    @classmethod
    def is_color_name(cls, src):
        """True if *src* is one of the known color names"""
        return src.strip().lower() in cls.known_colors

    def __eq__(self, other):
        if isinstance(other, RGBColor):
            return (self.r, self.g, self.b) == (other.r, other.g, other.b)
        elif isinstance(other, str):
            try:
                other = RGBColor(other)
            except ValueError:
                return False
            return (self.r, self.g, self.b) == (other.r, other.g, other.b)
        else:
            return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __str__(self):
        return "#%02X%02X%02X" % (self.r, self.g, self.b)

    def __repr__(self):
        return "RGBColor(%s)" % repr(str(self))

    def __hash__(self):
        return hash((self.r, self.g, self.b))


class CSSValue(DOMCompatibility):

    """Abstract class representing a CSS value

    priority
        The empty string (the default) or "important"."""

    #: the :class:`ValueType` of this value
    value_type = ValueType.CUSTOM

    def __init__(self, priority=''):
        self.priority = priority

    def get_css_text(self):
        raise NotImplementedError

    def copy(self):
        """Returns a new, independent copy of this value"""
        raise NotImplementedError

    def set_css_text(self, src):
        raise NotImplementedError

    css_text = property(lambda self: self.get_css_text(),
                        lambda self, src: self.set_css_text(src))

    def __str__(self):
        return self.get_css_text()

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, repr(self.get_css_text()))


def format_number(value):
    """Formats a float without a redundant trailing '.0'"""
    if not math.isfinite(value):
        return repr(value)
    elif value == int(value):
        return str(int(value))
    else:
        return repr(value)


class PrimitiveValue(CSSValue):

    """Represents a single CSS value

    primitive_type
        A :class:`PrimitiveType` value

    value
        A float for the numeric types, an :class:`RGBColor` for
        RGBCOLOR or a string for all other types.

    dimension
        The unit suffix, only used when primitive_type is DIMENSION.

    In most cases you won't create instances directly but will use
    :meth:`from_str`."""

    value_type = ValueType.PRIMITIVE_VALUE

    def __init__(self, primitive_type, value, dimension='', priority=''):
        super(PrimitiveValue, self).__init__(priority)
        self.primitive_type = primitive_type
        self.value = value
        self.dimension = dimension

    def copy(self):
        # RGBColor values are never modified in place
        return PrimitiveValue(self.primitive_type, self.value, self.dimension,
                              self.priority)

    @classmethod
    def from_str(cls, src):
        """Creates a new instance from a string

        The string is trimmed before being interpreted.  Numbers
        followed by a unit suffix are lengths, angles, times,
        frequencies or percentages, a number followed by an unknown
        suffix is a DIMENSION and a plain number is a NUMBER.  Quoted
        strings have their quotes removed.  Hex colors must have 3 or
        6 digits, other '#' values are UNKNOWN.  Everything else is an
        IDENT."""
        result = cls(PrimitiveType.UNKNOWN, '')
        result.set_css_text(src)
        return result

    def set_css_text(self, src):
        src = src.strip()
        self.dimension = ''
        p = BasicParser(src)
        number = p.parse_production(require_number, p)
        if number is not None:
            unit = src[p.pos:]
            utype = UNIT_TYPES.get(unit.lower(), None)
            if not unit:
                self.primitive_type = PrimitiveType.NUMBER
            elif utype is not None:
                self.primitive_type = utype
            elif unit.isalpha():
                self.primitive_type = PrimitiveType.DIMENSION
                self.dimension = unit
            else:
                self.primitive_type = PrimitiveType.IDENT
                self.value = src
                return
            self.value = number
        elif src[:1] in QUOTES:
            self.primitive_type = PrimitiveType.STRING
            self.value = unquote(src)
        elif src.startswith('#'):
            try:
                self.value = RGBColor(src)
                self.primitive_type = PrimitiveType.RGBCOLOR
            except ValueError:
                self.primitive_type = PrimitiveType.UNKNOWN
                self.value = src
        elif src[:4].lower() == 'url(' and src.endswith(')'):
            self.primitive_type = PrimitiveType.URI
            self.value = unquote(src[4:-1].strip())
        else:
            self.primitive_type = PrimitiveType.IDENT
            self.value = src

    def get_css_text(self):
        if self.primitive_type in FLOAT_TYPES:
            if self.primitive_type == PrimitiveType.DIMENSION:
                suffix = self.dimension
            else:
                suffix = UNIT_SUFFIXES[self.primitive_type]
            return format_number(self.value) + suffix
        elif self.primitive_type == PrimitiveType.RGBCOLOR:
            return str(self.value)
        elif self.primitive_type == PrimitiveType.STRING:
            # values holding a double quote are written in single quotes
            q = "'" if '"' in self.value else '"'
            return q + self.value + q
        elif self.primitive_type == PrimitiveType.URI:
            return 'url(%s)' % self.value
        else:
            return self.value

    def get_float_value(self, unit_type):
        """Returns the value as a float

        unit_type
            The :class:`PrimitiveType` required, this must be the
            value's own type as unit conversion is not supported.

        Raises CSSError if the value is not a float or the unit is
        different."""
        if self.primitive_type not in FLOAT_TYPES:
            raise CSSError("%s is not a float value" % self.get_css_text())
        if unit_type != self.primitive_type:
            raise CSSError("Can't convert %s to %s" % (
                self.get_css_text(), PrimitiveType.to_str(unit_type)))
        return self.value

    def set_float_value(self, unit_type, value):
        if unit_type not in FLOAT_TYPES:
            raise CSSError("%s is not a float type" % repr(unit_type))
        self.primitive_type = unit_type
        self.value = float(value)

    def get_string_value(self):
        """Returns the value as a string

        Only defined for the string, uri, ident and attr types."""
        if self.primitive_type not in STRING_TYPES:
            raise CSSError("%s is not a string value" % self.get_css_text())
        return self.value

    def set_string_value(self, string_type, value):
        if string_type not in STRING_TYPES:
            raise CSSError("%s is not a string type" % repr(string_type))
        self.primitive_type = string_type
        self.value = value

    def get_rgb_color_value(self):
        """Returns the value as an :class:`RGBColor`

        Identifiers that are known color names are converted."""
        if self.primitive_type == PrimitiveType.RGBCOLOR:
            return self.value
        elif self.primitive_type == PrimitiveType.IDENT and \
                RGBColor.is_color_name(self.value):
            return RGBColor(self.value)
        else:
            raise CSSError("%s is not a color" % self.get_css_text())

    def is_color(self):
        """True if this value is a color or a known color name"""
        return self.primitive_type == PrimitiveType.RGBCOLOR or (
            self.primitive_type == PrimitiveType.IDENT and
            RGBColor.is_color_name(self.value))


def require_number(p):
    """Parses a signed number using the parser *p*

    Returns a float.  The number must contain at least one digit, a
    decimal point may appear before or after the digits."""
    savepos = p.pos
    p.parse_one('+-')
    int_part = p.parse_digits(0)
    frac_part = ''
    if p.parse('.') is not None:
        frac_part = p.parse_digits(0)
    if not int_part and not frac_part:
        p.setpos(savepos)
        p.parser_error('number')
    result = float(p.src[savepos:p.pos])
    if not math.isfinite(result):
        # too many digits, treated as an identifier
        p.setpos(savepos)
        p.parser_error('number')
    return result


def unquote(src):
    """Removes matching quotes from the ends of src"""
    if src and src[0] in QUOTES:
        q = src[0]
        if len(src) > 1 and src[-1] == q:
            return src[1:-1]
        else:
            return src[1:]
    return src


def split_list(src):
    """Splits the text of a value list into tokens

    Tokens are separated by white space and commas, quoted strings are
    returned intact (with their quotes).  Returns a tuple of the list of
    tokens and a flag indicating whether or not any commas were
    found."""
    p = BasicParser(src)
    tokens = []
    comma = False
    while True:
        p.parse_s()
        if p.match_end():
            break
        elif p.parse(',') is not None:
            comma = True
        elif p.match_one(QUOTES):
            q = p.parse_one(QUOTES)
            text = p.parse_until(q)
            p.parse(q)
            tokens.append(q + text + q)
        else:
            tokens.append(p.parse_until_one(CSS_WHITESPACE + ',',
                                            eof_ok=True))
    return tokens, comma


class ValueList(CSSValue):

    """An ordered list of :class:`PrimitiveValue` instances

    A list never contains another list.  ValueList behaves like a
    read-only sequence and also provides the DOM length and item
    interface."""

    value_type = ValueType.VALUE_LIST

    def __init__(self, values=(), separator=', ', priority=''):
        super(ValueList, self).__init__(priority)
        self.values = list(values)
        for v in self.values:
            if not isinstance(v, PrimitiveValue):
                raise CSSError("ValueList may only contain primitives")
        self.separator = separator

    def copy(self):
        return ValueList([v.copy() for v in self.values], self.separator,
                         self.priority)

    @classmethod
    def from_str(cls, src):
        result = cls()
        result.set_css_text(src)
        return result

    def set_css_text(self, src):
        tokens, comma = split_list(src)
        self.values = [PrimitiveValue.from_str(t) for t in tokens]
        self.separator = ', ' if comma else ' '

    def get_css_text(self):
        return self.separator.join(v.get_css_text() for v in self.values)

    @property
    def length(self):
        return len(self.values)

    def item(self, index):
        """Returns the value at *index* or None if out of range"""
        if 0 <= index < len(self.values):
            return self.values[index]
        else:
            return None

    def __len__(self):
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self):
        return iter(self.values)


def parse_value(property_name, src):
    """Parses the text of a property value

    property_name
        The name of the property the value is for, some properties
        always take a list of values.

    src
        The value text

    Returns a :class:`ValueList` or a :class:`PrimitiveValue`."""
    if property_name in LIST_PROPERTIES:
        return ValueList.from_str(src)
    else:
        return PrimitiveValue.from_str(src)


def parse_value_list(src):
    """Parses the text of a list of values"""
    return ValueList.from_str(src)
