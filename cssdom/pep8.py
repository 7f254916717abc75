#! /usr/bin/env python
"""Module for DOM naming compatibility

The DOM Level 2 Style interfaces are defined with camelCase names such
as getPropertyValue or cssText.  The classes in this package use
pep8_style names throughout but derive from :class:`DOMCompatibility`
so that code written against the DOM names continues to work."""


def make_attr_name(name):
    """Converts name to pep8_style

    Upper case letters are replaced with their lower-case equivalent
    optionally preceded by '_' if one of the following conditions is
    met:

    *   it was preceded by a lower case letter

    *   it is preceded by an upper case letter and followed by a
        lower-case one

    As a result::

        make_attr_name('cssText') == 'css_text'
        make_attr_name('getPropertyCSSValue') == 'get_property_css_value'
        make_attr_name('Name') == 'name'
    """
    if name.islower():
        return name
    result = []
    for i, c in enumerate(name):
        if c.isupper():
            prev = name[i - 1] if i else ''
            next = name[i + 1] if i + 1 < len(name) else ''
            if prev.islower() or (prev.isupper() and next.islower()):
                result.append('_')
            result.append(c.lower())
        else:
            result.append(c)
    return ''.join(result)


class DOMCompatibility(object):

    """Mix-in resolving DOM camelCase names

    Attribute look-ups that fail are retried with the name converted by
    :func:`make_attr_name`.  Unlike a deprecation shim, DOM names are a
    supported interface so no warning is raised."""

    _dom_names = {}

    def __getattr__(self, name):
        """Retries name in pep8_style

        __getattr__ is only called when the usual methods of attribute
        resolution have failed so it has no impact on callers that use
        the pep8 names.  A cache of names is kept so that the mapping is
        only calculated once per run."""
        if name.startswith('_'):
            raise AttributeError(name)
        new_name = self._dom_names.get(name, None)
        if new_name is None:
            new_name = make_attr_name(name)
            if new_name == name:
                # we have nothing to add here
                self._dom_names[name] = ''
            else:
                self._dom_names[name] = new_name
        if new_name:
            return getattr(self, new_name)
        else:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        # setting cssText is part of the DOM interface
        if name[:1] != '_' and not name.islower():
            new_name = make_attr_name(name)
            if isinstance(getattr(type(self), new_name, None), property):
                name = new_name
        object.__setattr__(self, name, value)
