"""
Argot Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import ArgumentParser, Schema, SchemaBuilder, ValueType, create_parser

logger = logging.getLogger("argot")


__all__ = [
    "ArgumentParser",
    "Schema",
    "SchemaBuilder",
    "ValueType",
    "create_parser",
]
