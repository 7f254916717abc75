#! /usr/bin/env python
"""CSS rules, rule lists and style sheets"""

import logging

from .enumeration import Enumeration
from .errors import CSSIndexError
from .pep8 import DOMCompatibility
from .styles import StyleDeclaration


class RuleType(Enumeration):

    """Enumerates the types of CSS rule

    The integer values are the codes defined by DOM Level 2 Style."""

    decode = {
        'UNKNOWN_RULE': 0,
        'STYLE_RULE': 1,
        'CHARSET_RULE': 2,
        'IMPORT_RULE': 3,
        'MEDIA_RULE': 4,
        'FONT_FACE_RULE': 5,
        'PAGE_RULE': 6}


#: maps at-rule keywords onto rule types
AT_RULE_TYPES = {
    'charset': RuleType.CHARSET_RULE,
    'import': RuleType.IMPORT_RULE,
    'media': RuleType.MEDIA_RULE,
    'font-face': RuleType.FONT_FACE_RULE,
    'page': RuleType.PAGE_RULE}


class CSSRule(DOMCompatibility):

    """Abstract class for all rules"""

    #: the :class:`RuleType` of the rule
    rule_type = RuleType.UNKNOWN_RULE

    def __init__(self, parent_stylesheet=None):
        self.parent_stylesheet = parent_stylesheet

    def get_css_text(self):
        raise NotImplementedError

    css_text = property(lambda self: self.get_css_text())

    def __str__(self):
        return self.get_css_text()


class StyleRule(CSSRule):

    """A rule set: selector alternatives and a style declaration

    selectors
        A list of :class:`cssdom.selectors.SelectorChain` instances, the
        comma separated alternatives of the rule.

    style
        A :class:`cssdom.styles.StyleDeclaration`, if None an empty
        declaration is created."""

    rule_type = RuleType.STYLE_RULE

    def __init__(self, selectors=(), style=None, parent_stylesheet=None):
        super(StyleRule, self).__init__(parent_stylesheet)
        self.selectors = list(selectors)
        if style is None:
            style = StyleDeclaration()
        style.parent_rule = self
        self.style = style

    def get_selector_text(self):
        return ', '.join(s.get_css_text() for s in self.selectors)

    selector_text = property(get_selector_text)

    def get_css_text(self):
        declarations = "".join(
            "\t" + line for line in self.style.get_css_text().splitlines(True))
        return "%s\n{\n%s}\n" % (self.get_selector_text(), declarations)

    def matches(self, element, access, local_name=None):
        """True if any of the selector alternatives applies to element

        The alternatives are tested in order and testing stops at the
        first match."""
        for chain in self.selectors:
            if chain.matches(element, access, local_name):
                return True
        return False


class SkippedAtRule(CSSRule):

    """An at-rule that was skipped by the parser

    keyword
        The at-keyword without the '@', e.g., "media"

    text
        The text that was skipped, including the keyword

    Skipped rules are never added to a stylesheet's rules, the parser
    records them in :attr:`StyleSheet.skipped` instead."""

    def __init__(self, keyword, text, parent_stylesheet=None):
        super(SkippedAtRule, self).__init__(parent_stylesheet)
        self.keyword = keyword
        self.rule_type = AT_RULE_TYPES.get(keyword.lower(),
                                           RuleType.UNKNOWN_RULE)
        self.text = text

    def get_css_text(self):
        return self.text


class RuleList(DOMCompatibility):

    """An ordered list of rules

    Supports len, indexing and iteration in addition to the DOM length
    and item interface."""

    def __init__(self):
        self._rules = []

    @property
    def length(self):
        return len(self._rules)

    def item(self, index):
        """Returns the rule at index or None if index is out of range"""
        if 0 <= index < len(self._rules):
            return self._rules[index]
        else:
            return None

    def append(self, rule):
        self._rules.append(rule)

    def insert(self, index, rule):
        self._rules.insert(index, rule)

    def __delitem__(self, index):
        del self._rules[index]

    def __len__(self):
        return len(self._rules)

    def __getitem__(self, index):
        return self._rules[index]

    def __iter__(self):
        return iter(self._rules)


class StyleSheet(DOMCompatibility):

    """A CSS style sheet

    title
        The name of the sheet's source, used in diagnostic messages,
        e.g., the URI or "Internal Style Sheet".

    href
        The URI the sheet was loaded from, if any.

    owner_node
        The element or processing instruction that linked to or
        contained the sheet, if any.

    media
        The media the sheet is intended for, e.g., "print", as given in
        the document.  It is recorded but not evaluated."""

    def __init__(self, title=None, href=None, owner_node=None, media=None):
        self.title = title
        self.href = href
        self.owner_node = owner_node
        self.media = media
        self.disabled = False
        self.rules = RuleList()
        #: at-rules skipped while parsing
        self.skipped = []

    css_rules = property(lambda self: self.rules)

    def add_rule(self, rule):
        """Appends *rule* to the sheet"""
        rule.parent_stylesheet = self
        self.rules.append(rule)

    def insert_rule(self, rule, index):
        """Inserts a rule into the sheet

        rule
            The text of a single rule set.

        index
            The position at which to insert, the length of the rule
            list appends the rule.

        Returns the index at which the rule was inserted."""
        from .parser import CSSParser
        if index < 0 or index > len(self.rules):
            raise CSSIndexError("insert_rule index %i" % index)
        p = CSSParser(rule, self.title)
        p.parse_s()
        new_rule = p.require_rule_set()
        p.parse_s()
        p.require_end('end of rule')
        new_rule.parent_stylesheet = self
        self.rules.insert(index, new_rule)
        return index

    def delete_rule(self, index):
        """Deletes the rule at *index*"""
        if index < 0 or index >= len(self.rules):
            raise CSSIndexError("delete_rule index %i" % index)
        del self.rules[index]

    def get_css_text(self):
        return '\n'.join(r.get_css_text() for r in self.rules)

    css_text = property(get_css_text)

    def __str__(self):
        return self.get_css_text()

    def __repr__(self):
        return "StyleSheet(%s)" % repr(self.title)


def style_rules(stylesheets):
    """Iterates the style rules of a list of stylesheets

    Disabled sheets are skipped."""
    for sheet in stylesheets:
        if sheet.disabled:
            logging.debug("Skipping disabled stylesheet %s", sheet.title)
            continue
        for rule in sheet.rules:
            if rule.rule_type == RuleType.STYLE_RULE:
                yield rule
