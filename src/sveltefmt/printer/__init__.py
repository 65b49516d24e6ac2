"""Syntax tree to Doc printing.

Public API:
    - NodePrinter: dispatches every node kind to its layout rule
"""

from sveltefmt.printer.core import NodePrinter

__all__ = ["NodePrinter"]
