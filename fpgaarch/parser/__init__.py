# -*- encoding: ascii -*-

from .architecture import parse, parse_string, parse_stream

__all__ = ['parse', 'parse_string', 'parse_stream']
