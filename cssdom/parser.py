#! /usr/bin/env python
"""Parser for CSS style sheets and inline style attributes

The parser recognises rule sets made up of simple selectors and
declaration blocks.  At-rules are skipped, as are CSS comments and the
HTML comment delimiters that may surround the content of a style
element.  Parsing stops at the first structural error::

    import cssdom.parser as css

    sheet = css.parse_stylesheet("h1, h2 { color: green; }", "example")
    sheet.rules.item(0).style.get_property_value('color')   # 'green'"""

import logging

from .errors import CSSSyntaxError
from .rules import SkippedAtRule, StyleRule, StyleSheet
from .scanner import BasicParser, CSS_WHITESPACE
from .selectors import parse_selector_chain
from .styles import StyleDeclaration
from .values import QUOTES


#: the name used for sheets defined in style elements
INTERNAL_STYLESHEET = "Internal Style Sheet"

CDO = "<!--"
CDC = "-->"
COMMENT_START = "/*"


class CSSParser(BasicParser):

    """A parser for CSS

    src
        The CSS text as a character string or a file-like object
        opened in text mode.

    name
        An optional name for the source, such as a URI, used only in
        error messages.

    Structural errors raise :class:`cssdom.errors.CSSSyntaxError`, if
    the source ends inside a construct that must be closed
    :class:`cssdom.errors.UnexpectedEndError` is raised instead.  Both
    are derived from ValueError."""

    error_class = CSSSyntaxError

    def __init__(self, src, name=None):
        if not isinstance(src, str):
            src = src.read()
        self.name = name
        super(CSSParser, self).__init__(src)

    def require_stylesheet(self, stylesheet=None):
        """Parses the entire source as a style sheet

        stylesheet
            An optional :class:`cssdom.rules.StyleSheet` to add the
            parsed rules to.  By default a new sheet is created.

        Returns the style sheet.  The end of the source is a normal
        terminator at the top level."""
        if stylesheet is None:
            stylesheet = StyleSheet(title=self.name)
        while True:
            self.parse_s()
            if self.match_end():
                break
            elif self.match('@'):
                stylesheet.skipped.append(self.require_at_rule(stylesheet))
            elif self.parse(CDO) or self.parse(CDC):
                # ignorable markers, the content is processed normally
                continue
            elif self.parse(COMMENT_START):
                self.skip_comment()
            elif self.parse('}'):
                # left behind by a skipped at-rule containing blocks
                logging.debug("Discarding '}' at [%i] in %s",
                              self.pos - 1, self.name)
            else:
                stylesheet.add_rule(self.require_rule_set())
        logging.debug("Parsed %s: %i rules", self.name,
                      len(stylesheet.rules))
        return stylesheet

    def require_at_rule(self, stylesheet=None):
        """Parses and skips an at-rule

        Everything up to and including the next '}' is discarded, nested
        blocks are not balanced so a rule such as @media that contains
        rule sets is truncated after the first of them.  Returns a
        :class:`cssdom.rules.SkippedAtRule`."""
        start = self.pos
        self.require('@')
        keyword = self.parse_until_one(CSS_WHITESPACE + '{;}', eof_ok=True)
        self.parse_until_one('}')
        self.require('}')
        logging.debug("Skipping @%s rule in %s", keyword, self.name)
        return SkippedAtRule(keyword, self.src[start:self.pos], stylesheet)

    def require_rule_set(self):
        """Parses a rule set

        The selector alternatives are read up to the opening '{', the
        declaration block is parsed and the closing '}' required.
        Returns a :class:`cssdom.rules.StyleRule`."""
        rule = StyleRule()
        while True:
            self.parse_s()
            rule.selectors.append(self.require_selector_chain())
            if self.parse('{') is not None:
                self.require_declaration_block(rule.style)
                self.require('}')
                return rule
            else:
                self.require(',')

    def require_selector_chain(self):
        """Parses a single selector chain up to the next ',' or '{'

        Comments inside the selector are treated as white space."""
        start = self.pos
        text = []
        while True:
            text.append(self.parse_until_one(',{/'))
            if self.parse(COMMENT_START) is not None:
                self.skip_comment()
                text.append(' ')
            elif self.the_char == '/':
                text.append('/')
                self.next_char()
            else:
                break
        try:
            return parse_selector_chain(''.join(text))
        except CSSSyntaxError as err:
            self.setpos(start)
            self.parser_error(err.production)

    def require_declaration_block(self, style, inline=False):
        """Parses declarations into a style declaration

        style
            A :class:`cssdom.styles.StyleDeclaration` instance to add
            the properties to.

        inline
            True if parsing the value of a style attribute.  In inline
            mode the end of the source terminates the block and a
            property name without a ':' and value is skipped.

        Parsing stops at the closing '}', which is not consumed.
        Returns True if the block ended with a '}' and False if it
        ended at the end of the source (inline mode only)."""
        while True:
            self.parse_s()
            if self.match_end():
                if inline:
                    return False
                self.parser_error('}')
            elif self.match('}'):
                return True
            elif self.parse(';') is not None:
                continue
            elif self.parse(COMMENT_START) is not None:
                self.skip_comment()
                continue
            name = self.parse_until_one(CSS_WHITESPACE + ':}/',
                                        eof_ok=inline)
            self.parse_s()
            while self.parse(COMMENT_START) is not None:
                self.skip_comment()
                self.parse_s()
            if self.parse(':') is None:
                if inline:
                    logging.debug("Ignoring property %s with no value",
                                  name)
                    self.parse_until_one(';}', eof_ok=True)
                    continue
                self.require(':')
            self.parse_s()
            value = self.parse_value_text()
            self.parse(';')
            if name and value.strip():
                style.set_property(name, value)

    def parse_value_text(self):
        """Parses the text of a property value

        The value runs up to the next ';' or '}' or to the end of the
        source.  Quoted strings and parenthesised groups, such as
        url(...), may contain either character.  Returns the raw value
        text (possibly empty)."""
        start = self.pos
        while self.the_char is not None and self.the_char not in ';}':
            if self.the_char in QUOTES:
                q = self.the_char
                self.next_char()
                self.parse_until(q)
                self.parse(q)
            elif self.the_char == '(':
                self.next_char()
                self.parse_until(')')
                self.parse(')')
            else:
                self.next_char()
        return self.src[start:self.pos]


def parse_stylesheet(src, name=None, stylesheet=None):
    """Parses a style sheet

    src
        A character string or a text file-like object

    name
        An optional name for the sheet used in messages and as the
        sheet's title.

    Returns a :class:`cssdom.rules.StyleSheet`."""
    return CSSParser(src, name).require_stylesheet(stylesheet)


def parse_style_declaration(src, style=None):
    """Parses the text of a style attribute

    src
        The attribute value, e.g., "color: red; font-weight: bold"

    style
        An optional declaration to add the properties to, by default a
        new one is created.

    Returns a :class:`cssdom.styles.StyleDeclaration`."""
    if style is None:
        style = StyleDeclaration()
    CSSParser(src).require_declaration_block(style, inline=True)
    return style
