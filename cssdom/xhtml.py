#! /usr/bin/env python
"""XHTML names used when discovering and applying style sheets"""

#: the XHTML namespace
XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"

#: media types that are treated as HTML documents
HTML_MEDIA_TYPES = frozenset((
    "text/html",
    "application/xhtml+xml"))

#: the media type of CSS style sheets
CSS_MEDIA_TYPE = "text/css"

HEAD = "head"
LINK = "link"
STYLE = "style"

REL = "rel"
HREF = "href"
TYPE = "type"
MEDIA = "media"
STYLE_ATTR = "style"
CLASS_ATTR = "class"

#: the link type for style sheets
LINK_STYLESHEET = "stylesheet"

#: the target of style sheet processing instructions
XML_STYLESHEET = "xml-stylesheet"

DEFAULT_CSS = """
html, address, blockquote, body, dd, div, dl, dt, fieldset, form,
frame, frameset, h1, h2, h3, h4, h5, h6, noframes, ol, p, ul, center,
dir, hr, menu, pre { display: block; }
li { display: list-item; }
head, script, style, title, meta, link { display: none; }
table { display: table; }
tr { display: table-row; }
thead { display: table-header-group; }
tbody { display: table-row-group; }
tfoot { display: table-footer-group; }
col { display: table-column; }
colgroup { display: table-column-group; }
td, th { display: table-cell; }
caption { display: table-caption; }
th { font-weight: bold; }
h1 { font-size: 2em; margin-top: 0.67em; margin-bottom: 0.67em; }
h2 { font-size: 1.5em; margin-top: 0.75em; margin-bottom: 0.75em; }
h3 { font-size: 1.17em; margin-top: 0.83em; margin-bottom: 0.83em; }
h4 { margin-top: 1.12em; margin-bottom: 1.12em; }
h5 { font-size: 0.83em; margin-top: 1.5em; margin-bottom: 1.5em; }
h6 { font-size: 0.75em; margin-top: 1.67em; margin-bottom: 1.67em; }
h1, h2, h3, h4, h5, h6, b, strong { font-weight: bold; }
blockquote { margin-left: 40px; margin-right: 40px; }
i, cite, em, var, address { font-style: italic; }
pre, tt, code, kbd, samp { font-family: monospace; }
big { font-size: 1.17em; }
small, sub, sup { font-size: 0.83em; }
sub { vertical-align: sub; }
sup { vertical-align: super; }
s, strike, del { text-decoration: line-through; }
u, ins { text-decoration: underline; }
ol { list-style-type: decimal; }
ul { list-style-type: disc; }
center { text-align: center; }
"""
"""The default style sheet applied to XHTML documents"""
