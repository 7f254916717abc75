#! /usr/bin/env python
"""Writes style sheets as CSS text"""

import io

from .rules import RuleType


class CSSSerializer(object):

    """Serializes style sheets

    indent
        The string used to indent declarations, defaults to a tab.

    Each style rule is written as its selector text on one line, the
    opening brace on the next, one line per property and then the
    closing brace followed by a blank line.  Skipped at-rules are not
    written."""

    def __init__(self, indent="\t"):
        self.indent = indent

    def serialize(self, stylesheet, output):
        """Writes *stylesheet* to the text stream *output*"""
        for rule in stylesheet.rules:
            if rule.rule_type == RuleType.STYLE_RULE:
                self.serialize_rule(rule, output)
                output.write("\n")

    def serialize_rule(self, rule, output):
        output.write(rule.get_selector_text())
        output.write("\n{\n")
        style = rule.style
        for name in style:
            output.write(self.indent)
            output.write(name)
            output.write(": ")
            output.write(style.get_property_value(name))
            priority = style.get_property_priority(name)
            if priority:
                output.write(" !")
                output.write(priority)
            output.write(";\n")
        output.write("}\n")

    def to_str(self, stylesheet):
        """Returns *stylesheet* as a character string"""
        output = io.StringIO()
        self.serialize(stylesheet, output)
        return output.getvalue()
