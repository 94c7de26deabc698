"""Utility components for newsgrid."""

from newsgrid.utils.exceptions import (
    CardinalityMismatch,
    ConfigError,
    DateParseError,
    ExtractionError,
    NetworkError,
    NewsgridError,
    ParseError,
    SelectorError,
)
from newsgrid.utils.files import init_newsgrid
from newsgrid.utils.headers import HeaderGenerator
from newsgrid.utils.logging import setup_local_logging

__all__ = [
    'CardinalityMismatch',
    'ConfigError',
    'DateParseError',
    'ExtractionError',
    'HeaderGenerator',
    'NetworkError',
    'NewsgridError',
    'ParseError',
    'SelectorError',
    'init_newsgrid',
    'setup_local_logging',
]
