# -*- encoding: ascii -*-

__all__ = []

# Exceptions
from .exception import ArchParseErrorKind, ArchParseError
__all__.extend(["ArchParseErrorKind", "ArchParseError"])

# Tokenizer
from .xml import TextPosition
__all__.extend(["TextPosition"])

# Architecture tree
from .arch import *
from .arch import __all__ as _arch_all
__all__.extend(_arch_all)

# Parser entry points
from .parser import parse, parse_string, parse_stream
__all__.extend(["parse", "parse_string", "parse_stream"])
