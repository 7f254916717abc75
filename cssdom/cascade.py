#! /usr/bin/env python
"""Applies CSS style sheets to a tree of elements

The result of applying style sheets is a resolved
:class:`cssdom.styles.StyleDeclaration` for each element that one or
more rules applied to.  The engine works with any tree through the
:class:`cssdom.selectors.ElementAccess` interface, a concrete
implementation for xml.etree.ElementTree is provided::

    import xml.etree.ElementTree as etree
    from cssdom.cascade import ElementTreeStylesheetApplier
    from cssdom.parser import parse_stylesheet

    doc = etree.fromstring('<body><h1>Hi</h1></body>')
    applier = ElementTreeStylesheetApplier()
    applier.apply_stylesheets(
        [parse_stylesheet("h1 { color: green; }")], doc)
    applier.get_style(doc[0]).get_property_value('color')   # 'green'
"""

import logging
import os.path
import urllib.parse
import urllib.request
import weakref

from .parser import (
    INTERNAL_STYLESHEET,
    parse_style_declaration,
    parse_stylesheet)
from .rules import style_rules
from .scanner import BasicParser, detect_encoding
from .selectors import ElementAccess
from .styles import StyleDeclaration
from .values import QUOTES
from . import xhtml


_default_css = {}
_default_sheets = {}


def register_default_stylesheet(namespace, css_text):
    """Registers the default style sheet for a namespace

    namespace
        The namespace URI of a document element, None for elements with
        no namespace.

    css_text
        The text of the style sheet, parsed when first used.

    Any previously registered sheet for the namespace is replaced."""
    _default_css[namespace] = css_text
    _default_sheets.pop(namespace, None)


def get_default_stylesheet(namespace):
    """Returns the default style sheet for a namespace or None"""
    sheet = _default_sheets.get(namespace, None)
    if sheet is None:
        css_text = _default_css.get(namespace, None)
        if css_text is None:
            return None
        sheet = parse_stylesheet(css_text, "Default Style Sheet <%s>" %
                                 namespace)
        _default_sheets[namespace] = sheet
    return sheet


register_default_stylesheet(xhtml.XHTML_NAMESPACE, xhtml.DEFAULT_CSS)


def parse_pseudo_attributes(data):
    """Parses the data of a processing instruction

    data
        Text of the form: href="style.css" type='text/css'

    Returns a dictionary of pseudo-attribute values.  Raises ValueError
    if the data is not well formed."""
    p = BasicParser(data)
    result = {}
    while True:
        p.parse_s()
        if p.match_end():
            break
        name = p.parse_until('=').strip()
        p.require('=')
        p.parse_s()
        q = p.require_one(QUOTES, "quoted value")
        value = p.parse_until(q)
        p.require(q)
        result[name] = value
    return result


class AbstractStylesheetApplier(ElementAccess):

    """Abstract class for applying style sheets to documents

    media_type
        The media type of the document, if it is one of the HTML media
        types the default XHTML style sheet is applied even if the
        document element is not in the XHTML namespace.

    Derived classes implement the :class:`cssdom.selectors.ElementAccess`
    methods together with the document level methods defined here."""

    def __init__(self, media_type=None):
        self.media_type = media_type

    def get_document_element(self, document):
        """Returns the root element of *document*"""
        raise NotImplementedError

    def get_processing_instructions(self, document):
        """Returns an iterable of (target, data) tuples

        The processing instructions that precede the document element
        in document order."""
        raise NotImplementedError

    def get_element_text(self, element):
        """Returns the text content of *element*"""
        raise NotImplementedError

    def import_style(self, element, style):
        """Merges *style* into the resolved style of *element*

        The resolved style is created, empty, if the element does not
        have one yet."""
        raise NotImplementedError

    def resolve_uri(self, href):
        """Returns the URI of a linked style sheet"""
        return href

    def read_stylesheet(self, uri):
        """Returns the text of the style sheet at *uri*

        Raises IOError if the sheet can't be read."""
        raise NotImplementedError

    def index_tree(self, root):
        """Called before the tree rooted at *root* is walked

        The default implementation does nothing."""
        pass

    def is_html_element(self, element, name):
        return (self.get_local_name(element) == name and
                self.get_namespace(element) in
                (xhtml.XHTML_NAMESPACE, None))

    def get_html_head(self, root):
        """Returns the head element of an HTML document or None"""
        if not self.is_html_element(root, 'html'):
            return None
        for child in self.get_child_elements(root):
            if self.is_html_element(child, xhtml.HEAD):
                return child
        return None

    def load_stylesheet(self, href, owner_node=None, media=None):
        """Loads and parses an external style sheet

        media
            The media attribute of the link or processing instruction,
            recorded on the sheet but not evaluated.

        Errors are logged and None is returned, a bad style sheet does
        not prevent the others being applied."""
        uri = self.resolve_uri(href)
        try:
            logging.debug("Loading style sheet %s", uri)
            sheet = parse_stylesheet(self.read_stylesheet(uri), uri)
        except (IOError, ValueError) as err:
            logging.warning("Failed to load style sheet %s: %s", uri,
                            str(err))
            return None
        sheet.href = uri
        sheet.owner_node = owner_node
        sheet.media = media
        return sheet

    def get_stylesheets(self, document):
        """Returns the list of style sheets that apply to *document*

        Sheets are returned in the order in which they should be
        applied: the default sheets for the namespace of the document
        element (and for XHTML if the media type is an HTML type), then
        external sheets linked by xml-stylesheet processing
        instructions or by link elements in the head of an HTML
        document, then the sheets defined in style elements in the
        head."""
        root = self.get_document_element(document)
        namespaces = [self.get_namespace(root)]
        if self.media_type in xhtml.HTML_MEDIA_TYPES and \
                xhtml.XHTML_NAMESPACE not in namespaces:
            namespaces.append(xhtml.XHTML_NAMESPACE)
        stylesheets = []
        for ns in namespaces:
            sheet = get_default_stylesheet(ns)
            if sheet is not None:
                stylesheets.append(sheet)
        for target, data in self.get_processing_instructions(document):
            if target != xhtml.XML_STYLESHEET:
                continue
            try:
                attrs = parse_pseudo_attributes(data)
            except ValueError as err:
                logging.warning("Ignoring %s: %s", xhtml.XML_STYLESHEET,
                                str(err))
                continue
            stype = attrs.get(xhtml.TYPE, None)
            if stype and stype.strip().lower() != xhtml.CSS_MEDIA_TYPE:
                continue
            href = attrs.get(xhtml.HREF, None)
            if not href:
                logging.warning("%s with no href", xhtml.XML_STYLESHEET)
                continue
            sheet = self.load_stylesheet(href, media=attrs.get(xhtml.MEDIA))
            if sheet is not None:
                stylesheets.append(sheet)
        head = self.get_html_head(root)
        if head is None:
            return stylesheets
        for child in self.get_child_elements(head):
            if not self.is_html_element(child, xhtml.LINK):
                continue
            rel = self.get_attribute_value(child, None, xhtml.REL) or ''
            href = self.get_attribute_value(child, None, xhtml.HREF)
            if xhtml.LINK_STYLESHEET in rel.lower().split() and href:
                sheet = self.load_stylesheet(
                    href, child,
                    self.get_attribute_value(child, None, xhtml.MEDIA))
                if sheet is not None:
                    stylesheets.append(sheet)
        for child in self.get_child_elements(head):
            if not self.is_html_element(child, xhtml.STYLE):
                continue
            try:
                sheet = parse_stylesheet(self.get_element_text(child),
                                         INTERNAL_STYLESHEET)
            except ValueError as err:
                logging.warning("Failed to parse style element: %s",
                                str(err))
                continue
            sheet.owner_node = child
            sheet.media = self.get_attribute_value(child, None, xhtml.MEDIA)
            stylesheets.append(sheet)
        return stylesheets

    def walk(self, root):
        """Iterates over root and its descendants in document order"""
        stack = [root]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(list(self.get_child_elements(element))))

    def apply_stylesheet(self, stylesheet, root):
        """Applies a single style sheet to the tree rooted at *root*

        For each element, the rules are tested in order and the style of
        each matching rule is merged into the element's resolved style,
        so later rules override earlier ones."""
        rules = list(style_rules([stylesheet]))
        if not rules:
            return
        for element in self.walk(root):
            local_name = self.get_local_name(element)
            for rule in rules:
                if rule.matches(element, self, local_name):
                    self.import_style(element, rule.style)

    def apply_stylesheets(self, stylesheets, root):
        """Applies style sheets, in order, to the tree rooted at *root*"""
        self.index_tree(root)
        for sheet in stylesheets:
            self.apply_stylesheet(sheet, root)

    def apply_local_styles(self, root):
        """Applies the style attributes of root and its descendants

        Local styles override the styles applied from style sheets so
        should be applied last.  An attribute that can't be parsed is
        logged and ignored."""
        self.index_tree(root)
        for element in self.walk(root):
            src = self.get_attribute_value(element, None, xhtml.STYLE_ATTR)
            if not src or not src.strip():
                continue
            try:
                style = parse_style_declaration(src)
            except ValueError as err:
                logging.warning("Ignoring style attribute on <%s>: %s",
                                self.get_local_name(element), str(err))
                continue
            self.import_style(element, style)

    def apply_styles(self, document):
        """Applies all style sheets and local styles to *document*

        Returns the list of style sheets applied."""
        stylesheets = self.get_stylesheets(document)
        root = self.get_document_element(document)
        self.apply_stylesheets(stylesheets, root)
        self.apply_local_styles(root)
        return stylesheets


def open_uri(uri):
    """Opens *uri* for reading bytes

    URIs with no scheme are treated as local file paths."""
    scheme = urllib.parse.urlsplit(uri).scheme
    if not scheme or (len(scheme) == 1 and os.path.isabs(uri)):
        return open(uri, 'rb')
    else:
        return urllib.request.urlopen(uri)


class ElementTreeStylesheetApplier(AbstractStylesheetApplier):

    """Applies style sheets to xml.etree.ElementTree trees

    base
        The base URI (or file path) used to resolve relative links to
        style sheets.

    media_type
        See :class:`AbstractStylesheetApplier`

    opener
        A function that takes a URI and returns a binary file-like
        object, defaults to :func:`open_uri`.

    processing_instructions
        An iterable of the processing instructions that precede the
        document element.  ElementTree does not keep these so they must
        be passed separately, either as strings such as::

            'xml-stylesheet href="style.css" type="text/css"'

        or as (target, data) tuples.

    Resolved styles are kept in a table that does not keep elements
    alive, they are retrieved with :meth:`get_style`."""

    def __init__(self, base=None, media_type=None, opener=None,
                 processing_instructions=()):
        super(ElementTreeStylesheetApplier, self).__init__(media_type)
        self.base = base
        self.opener = opener or open_uri
        self.processing_instructions = []
        for pi in processing_instructions:
            if isinstance(pi, str):
                target, sep, data = pi.strip().partition(' ')
                pi = (target, data)
            self.processing_instructions.append(pi)
        self._styles = weakref.WeakKeyDictionary()
        self._parents = weakref.WeakKeyDictionary()

    def get_style(self, element):
        """Returns the resolved style of *element* or None"""
        return self._styles.get(element, None)

    def set_style(self, element, style):
        """Sets the resolved style of *element*"""
        self._styles[element] = style

    def import_style(self, element, style):
        resolved = self._styles.get(element, None)
        if resolved is None:
            resolved = StyleDeclaration()
            self._styles[element] = resolved
        resolved.import_style(style)

    def index_tree(self, root):
        for parent in root.iter():
            for child in parent:
                self._parents[child] = weakref.ref(parent)

    def get_document_element(self, document):
        if hasattr(document, 'getroot'):
            return document.getroot()
        return document

    def get_processing_instructions(self, document):
        return self.processing_instructions

    def get_element_text(self, element):
        return ''.join(element.itertext())

    def get_local_name(self, element):
        tag = element.tag
        if tag[:1] == '{':
            return tag[tag.index('}') + 1:]
        return tag

    def get_namespace(self, element):
        tag = element.tag
        if tag[:1] == '{':
            return tag[1:tag.index('}')]
        return None

    def get_attribute_value(self, element, ns, name):
        if ns:
            name = "{%s}%s" % (ns, name)
        return element.get(name)

    def get_parent_element(self, element):
        parent = self._parents.get(element, None)
        return None if parent is None else parent()

    def get_child_elements(self, element):
        # comments and processing instructions have non-string tags
        return [child for child in element if isinstance(child.tag, str)]

    def resolve_uri(self, href):
        if self.base:
            return urllib.parse.urljoin(self.base, href)
        return href

    def read_stylesheet(self, uri):
        with self.opener(uri) as f:
            data = f.read()
        return data.decode(detect_encoding(data[:4]))


def apply_stylesheets(stylesheets, root, applier=None):
    """Applies style sheets to an ElementTree element

    stylesheets
        A list of :class:`cssdom.rules.StyleSheet` instances in the
        order they are to be applied.

    root
        The root of the element tree to style.

    applier
        An optional applier, by default a new
        :class:`ElementTreeStylesheetApplier` is used.

    Returns the applier, use its get_style method to obtain the
    resolved styles."""
    if applier is None:
        applier = ElementTreeStylesheetApplier()
    applier.apply_stylesheets(stylesheets, root)
    return applier
