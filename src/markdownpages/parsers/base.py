#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/parsers/base.py
"""Base class for source-text parsers.

Parsers turn page source into the markdownpages AST. They are stateless
between calls: anything a parse accumulates (such as categories) is handed
in by the caller for that call only.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from markdownpages.ast import Document
from markdownpages.exceptions import InvalidOptionsError
from markdownpages.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, text: str, *args: Any, **kwargs: Any) -> Document:
        """Parse source text into an AST Document.

        Parameters
        ----------
        text : str
            Source text

        Returns
        -------
        Document
            Root of the parsed tree

        """
        pass
