"""A CSS parser and style cascade engine for XML and XHTML documents"""
