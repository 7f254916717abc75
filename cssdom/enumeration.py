#! /usr/bin/env python
"""Simple integer enumerations with string mappings"""

import logging


class EnumMetaClass(type):

    """Metaclass for :class:`Enumeration`

    Initialises the Enumeration immediately after the class is
    defined."""

    def __init__(self, name, bases, dct):
        super(EnumMetaClass, self).__init__(name, bases, dct)
        # self is a class here!
        self._init_enum()


class Enumeration(object, metaclass=EnumMetaClass):

    """Abstract class for defining enumerations

    The class is not designed to be instantiated but to act as a method
    of defining constants to represent the values of an enumeration and
    for converting between those constants and the appropriate string
    representations.

    Derived classes define a single class member called 'decode' which
    is a mapping from canonical strings to simple integers.  Once
    defined the class is populated with a reverse mapping dictionary
    (called encode) and the enumeration strings are added as attributes
    of the class itself::

        class RuleKind(Enumeration):
            decode = {
                'STYLE': 1,
                'MEDIA': 4}

        RuleKind.STYLE == 1    # True thanks to metaclass

    An optional dictionary called aliases maps additional names onto
    canonical strings.  The special key None defines a default value
    for the enumeration, mapped to an attribute called DEFAULT."""

    @classmethod
    def _init_enum(cls):
        if 'decode' not in cls.__dict__:
            # Skip initialisation for Enumeration itself
            return
        cls.encode = dict((v, k) for k, v in cls.decode.items())
        aliases = cls.__dict__.get('aliases', {})
        for k, v in aliases.items():
            if k is None:
                cls.DEFAULT = cls.decode[v]
            else:
                cls.decode[k] = cls.decode[v]
        for k, v in cls.decode.items():
            if hasattr(cls, k):
                logging.error("Illegal name for Enumeration: %s", repr(k))
            else:
                setattr(cls, k, v)

    DEFAULT = None
    """The DEFAULT value of the enumeration defaults to None"""

    @classmethod
    def from_str(cls, src):
        """Decodes a string returning a value in this enumeration.

        If no legal value can be decoded then ValueError is raised."""
        try:
            src = src.strip()
            return cls.decode[src]
        except KeyError:
            raise ValueError("Can't decode %s from %s" % (cls.__name__, src))

    @classmethod
    def to_str(cls, value):
        """Encodes *value* as its canonical string

        Raises KeyError if value is not in this enumeration."""
        return cls.encode[value]
