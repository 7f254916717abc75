#! /usr/bin/env python
"""Character scanning primitives used by the CSS parser"""

import codecs


#: CSS white space characters
CSS_WHITESPACE = " \t\r\n\f"


def detect_encoding(magic):
    """Guesses an encoding from a byte string

    magic
        A string of at least two bytes, the start of an external
        stylesheet's data.

    Byte order marks are recognised for UTF-32, UTF-16 and UTF-8.  The
    return result is a codec name suitable for passing to
    :func:`codecs.lookup`, if no byte order mark is found the result is
    'utf-8' (the CSS default).  Note that when a BOM is found the name
    returned causes the BOM to be discarded on decoding."""
    if magic.startswith(codecs.BOM_UTF32_BE) or \
            magic.startswith(codecs.BOM_UTF32_LE):
        return 'utf-32'
    elif magic.startswith(codecs.BOM_UTF8):
        return 'utf-8-sig'
    elif magic.startswith(codecs.BOM_UTF16_BE) or \
            magic.startswith(codecs.BOM_UTF16_LE):
        return 'utf-16'
    else:
        return 'utf-8'


class ParserError(ValueError):

    """Exception raised by :class:`BasicParser`

    production
        The name of the production being parsed

    parser
        The :class:`BasicParser` instance raising the error (optional)

    ParserError is a subclass of ValueError."""

    def __init__(self, production, parser=None):
        self.production = production
        if parser:
            #: the position of the parser when the error was raised
            self.pos = parser.pos
            #: up to 40 characters to the left of pos
            self.left = parser.src[max(0, self.pos - 40):self.pos]
            #: up to 40 characters to the right of pos
            self.right = parser.src[self.pos:self.pos + 40]
            if production:
                msg = "%s: expected %s at [%i]" % (
                    self.__class__.__name__, production, self.pos)
            else:
                msg = "%s: at [%i]" % (self.__class__.__name__, self.pos)
            #: the name of the source being parsed, if known
            self.source_name = getattr(parser, 'name', None)
            if self.source_name:
                msg = "%s in %s" % (msg, self.source_name)
        else:
            self.source_name = None
            self.pos = None
            self.left = None
            self.right = None
            if production:
                msg = "%s: expected %s" % (
                    self.__class__.__name__, production)
            else:
                msg = self.__class__.__name__
        ValueError.__init__(self, msg)


class UnexpectedEndError(ParserError):

    """Raised when the source ends inside an open construct"""
    pass


class ParserMixin(object):

    """A mix-in class for parsing

    Derived classes must define parser_error, match_end, pos and
    setpos."""

    def require_production(self, result, production=None):
        """Returns *result* if not None or raises ParserError."""
        if result is None:
            self.parser_error(production)
        else:
            return result

    def parse_production(self, require_method, *args, **kwargs):
        """Executes the bound method *require_method*.

        If successful the result of the method is returned.  If any
        ValueError (including :class:`ParserError`) is raised, the
        exception is caught, the parser rewound and None is returned."""
        savepos = self.pos
        try:
            return require_method(*args, **kwargs)
        except ValueError:
            self.setpos(savepos)
            return None

    def require_end(self, production='end'):
        """Tests that the parser has consumed all the source"""
        if not self.match_end():
            self.parser_error(production)


class BasicParser(ParserMixin):

    """A base class for parsing character strings

    source
        A string of characters.

    Methods are named according to the type of operation they perform.

        match_*
            Returns True or False depending on whether or not a syntax
            production is matched at the current location.  The state
            of the parser is unchanged.

        parse_*
            Attempts to parse a syntax element returning an appropriate
            object as the result or None if the production is not
            present.  The position of the parser is only changed if the
            element was parsed successfully.

        require_*
            Parses a syntax production, returning an appropriate object
            as the result.  If the production is not matched a
            :class:`ParserError` is raised.  If the source runs out
            before the production is matched then the more specific
            :class:`UnexpectedEndError` is raised instead."""

    #: the class of error raised by :meth:`parser_error`
    error_class = ParserError

    #: the class of error raised at the end of the source
    end_error_class = UnexpectedEndError

    def __init__(self, source):
        self.src = source       #: the string being parsed
        self.pos = -1           #: the position of the current character
        self.the_char = None
        """The current character or None if the parser is positioned
        outside the src string."""
        self.last_error = None
        self.next_char()

    def setpos(self, new_pos):
        """Sets the position of the parser to *new_pos*"""
        self.pos = new_pos - 1
        self.next_char()

    def next_char(self):
        """Points the parser at the next character.

        Updates *pos* and *the_char*."""
        self.pos += 1
        if self.pos >= 0 and self.pos < len(self.src):
            self.the_char = self.src[self.pos]
        else:
            self.the_char = None

    def parser_error(self, production=None):
        """Raises an error encountered by the parser

        If the parser has reached the end of the source the error raised
        is an :class:`UnexpectedEndError`.  If production is None then
        the previous error is re-raised, where there is one.

        The position of the parser is always set to the position of the
        error raised."""
        if production and self.match_end():
            e = self.end_error_class(production, self)
        elif production:
            e = self.error_class(production, self)
        elif self.last_error is not None and self.pos <= self.last_error.pos:
            e = self.last_error
        else:
            e = self.error_class('', self)
        if self.last_error is None or e.pos > self.last_error.pos:
            self.last_error = e
        if e.pos != self.pos:
            self.setpos(e.pos)
        raise e

    def match_end(self):
        """True if all of :attr:`src` has been parsed"""
        return self.the_char is None

    def match(self, match_string):
        """Returns true if *match_string* is at the current position"""
        if self.the_char is None:
            return False
        else:
            return self.src[self.pos:self.pos +
                            len(match_string)] == match_string

    def parse(self, match_string):
        """Parses *match_string*

        Returns *match_string* or None if it cannot be parsed."""
        if self.match(match_string):
            self.setpos(self.pos + len(match_string))
            return match_string
        else:
            return None

    def require(self, match_string, production=None):
        """Parses and requires *match_string*

        match_string
            The string to be parsed

        production
            Optional name of production, defaults to match_string itself.

        For consistency, returns match_string on success."""
        if not self.parse(match_string):
            if production is None:
                production = match_string
            self.parser_error(production)
        else:
            return match_string

    def parse_until(self, match_string):
        """Parses up to but not including *match_string*.

        If match_string is not found then all the remaining characters
        in the source are parsed.  Returns the parsed text, even if
        empty.  Never returns None."""
        match_pos = self.src.find(match_string, self.pos)
        if match_pos == -1:
            result = self.src[self.pos:]
            self.setpos(len(self.src))
        else:
            result = self.src[self.pos:match_pos]
            self.setpos(match_pos)
        return result

    def parse_until_one(self, match_chars, eof_ok=False):
        """Parses up to but not including any of *match_chars*

        match_chars
            A string of characters, any one of which terminates the
            text.

        eof_ok
            When False (the default) the source must contain one of
            match_chars and :class:`UnexpectedEndError` is raised if it
            does not.  When True the end of the source is also a valid
            terminator and the remaining text is returned.

        The parser is left pointing at the terminating character."""
        start = self.pos
        end = len(self.src)
        while self.pos < end:
            if self.the_char in match_chars:
                return self.src[start:self.pos]
            self.next_char()
        if eof_ok:
            return self.src[start:]
        self.parser_error("one of %s" % repr(match_chars))

    def match_one(self, match_chars):
        """Returns true if one of *match_chars* is at the current position.

        The 'in' operator is used to test match_chars so this can be a
        list or tuple of characters, it does not have to be string."""
        if self.the_char is None:
            return False
        else:
            return self.the_char in match_chars

    def parse_one(self, match_chars):
        """Parses one of *match_chars*.

        Returns the character or None if no match is found."""
        if self.match_one(match_chars):
            result = self.the_char
            self.next_char()
            return result
        else:
            return None

    def require_one(self, match_chars, production=None):
        """Parses and requires one of *match_chars*"""
        result = self.parse_one(match_chars)
        if result is None:
            self.parser_error(production or repr(match_chars))
        return result

    def parse_s(self):
        """Parses CSS white space

        Returns the number of characters skipped, which may be 0."""
        count = 0
        while self.the_char is not None and self.the_char in CSS_WHITESPACE:
            count += 1
            self.next_char()
        return count

    def skip_comment(self):
        """Skips the remainder of a comment

        Call immediately after the opening '/*' has been parsed; the
        parser is advanced past the closing '*/'.  Any '*' that is not
        followed by '/' is part of the comment.  A comment that is not
        closed runs to the end of the source."""
        while True:
            self.parse_until('*')
            if self.parse('*') is None:
                # unterminated comment
                break
            if self.parse('/') is not None:
                break

    digits = "0123456789"

    def parse_digits(self, min, max=None):
        """Parses a string of digits

        min
            The minimum number of digits to parse.  There is a special
            case where min=0, in this case an empty string may be
            returned.

        max (default None)
            The maximum number of digits to parse, or None there is no
            maximum.

        Returns the string of digits or None if no digits can be parsed.
        Only ASCII digits are considered."""
        if min < 0 or (max is not None and min > max):
            raise ValueError("min must be > 0")
        savepos = self.pos
        rlen = 0
        while max is None or rlen < max:
            if self.parse_one(self.digits) is None:
                break
            rlen += 1
        if rlen < min:
            self.setpos(savepos)
            return None
        return self.src[savepos:savepos + rlen]

    hex_digits = "0123456789abcdefABCDEF"

    def parse_hex_digits(self, min, max=None):
        """Parses a string of hex-digits

        As for :meth:`parse_digits` but letters a-f are also matched in
        either case."""
        if min < 0 or (max is not None and min > max):
            raise ValueError("min must be > 0")
        savepos = self.pos
        rlen = 0
        while max is None or rlen < max:
            if self.parse_one(self.hex_digits) is None:
                break
            rlen += 1
        if rlen < min:
            self.setpos(savepos)
            return None
        return self.src[savepos:savepos + rlen]
