#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/renderers/base.py
"""Base classes for AST renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from markdownpages.ast import Document
from markdownpages.ast.nodes import Node
from markdownpages.exceptions import InvalidOptionsError
from markdownpages.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin rendering a list of inline nodes to a string.

    The implementing class must have an ``_output`` list that its visit
    methods append to.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render inline nodes by temporarily capturing the output buffer.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
