# -*- encoding: ascii -*-
"""Utility classes and functions."""

import enum
import logging
import re
import sys

__all__ = ["uno", "parse_int", "parse_float", "Enum", "enable_stdout_logging"]

def uno(*args):
    """Return the first non- None value of the arguments

    Args:
        *args: Variable positional arguments

    Returns:
        The first non-``None`` value or None

    """
    try:
        return next(filter(lambda x: x is not None, args))
    except StopIteration:
        return None

_int_pattern = re.compile(r'[+-]?[0-9]+')

def parse_int(text):
    """Parse a decimal integer.

    Unlike :obj:`int`, surrounding whitespace, ``_`` digit separators and non-ASCII digits are rejected.

    Raises:
        `ValueError`: If ``text`` is not a plain decimal integer
    """
    if _int_pattern.fullmatch(text) is None:
        raise ValueError("invalid integer '{}'".format(text))
    return int(text)

def parse_float(text):
    """Parse a floating-point number with the same restrictions as `parse_int`.

    Raises:
        `ValueError`: If ``text`` is not a plain floating-point number
    """
    if not text.isascii() or '_' in text or any(c.isspace() for c in text):
        raise ValueError("invalid float literal '{}'".format(text))
    return float(text)

class Enum(enum.IntEnum):
    """``IntEnum`` enhanced with auto-generated test methods and a few other helpful methods.

    For example:
        >>> class MyEnum(Enum):
        ...     foo = 0
        ...     global_ = 1
        >>> MyEnum.foo.is_foo
        True
        >>> MyEnum.foo.is_global_
        False
        >>> MyEnum.global_.is_global
        True

    Notes:
        If any of the enum values has a trailing underscore, you may omit the trailing underscore
    """
    def __getattr__(self, attr):
        if not attr.startswith('is_'):
            raise AttributeError(attr)
        v = attr[3:]
        try:
            return self is type(self)[v]
        except KeyError:
            try:
                if not v.endswith('_'):
                    return self is type(self)[v + '_']
            except KeyError:
                pass
            raise AttributeError(attr)

    def case(self, *args, **kwargs):
        """Use this enum as a variable in a switch-case clause.

        Note that ``default`` is a reserved keyword. If set, the value will be used if no matching case specified.
        """
        if self.value >= 0:
            try:
                return args[self.value]
            except IndexError:
                pass
        try:
            return kwargs[self.name]
        except KeyError:
            try:
                return kwargs['default']
            except KeyError:
                raise ValueError("Value unspecified for case {!r}".format(self))

    @classmethod
    def from_text(cls, text):
        """Look up the member whose XML spelling is ``text``.

        Members whose names would clash with Python keywords carry a trailing underscore, which is ignored here.

        Raises:
            `ValueError`: If no member is spelled ``text``
        """
        for member in cls:
            if member.text == text:
                return member
        raise ValueError(text)

    @property
    def text(self):
        """:obj:`str`: Spelling of this member in the XML document."""
        return self.name[:-1] if self.name.endswith('_') else self.name

def enable_stdout_logging(name, level=logging.INFO, verbose=False):
    hdl = logging.StreamHandler(sys.stdout)
    if verbose:
        hdl.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s'))
    else:
        hdl.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger = logging.getLogger(name)
    logger.addHandler(hdl)
    logger.setLevel(level)
