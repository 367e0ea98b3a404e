"""Dump text parsers."""

from dctm_parser.parsers.dump_parser import DumpAccumulator, ParserState, parse_dump
from dctm_parser.parsers.line_classifier import (
    AttributeLine,
    BlankLine,
    ContinuationLine,
    DumpLine,
    SeparatorLine,
    UnrecognizedLine,
    classify_line,
)

__all__ = [
    'DumpAccumulator', 'ParserState', 'parse_dump',
    'AttributeLine', 'BlankLine', 'ContinuationLine', 'DumpLine',
    'SeparatorLine', 'UnrecognizedLine', 'classify_line',
]
