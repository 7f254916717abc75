#! /usr/bin/env python
"""The module creates some basic constants to describe the cssdom package."""

title_name = "cssdom"
name = "cssdom"
copyright = "\xA92008-2026, the cssdom authors"

major_version = "0.1"
build_date = "20261018"
version = "%s.%s" % (major_version, build_date)

title = (
    "cssdom: "
    "CSS parser and style cascade engine for XML and XHTML documents")
