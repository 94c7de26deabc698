"""Selector engine exports."""

from newsgrid.core.selection.engine import Document, ElementHandle, attr, select, select_one, text

__all__ = ['Document', 'ElementHandle', 'attr', 'select', 'select_one', 'text']
