"""Exceptions raised at the export/print boundary.

The entity and document layers never raise for missing records or empty
fields; only exporting a document can fail in a way the user has to see.
"""

from __future__ import annotations


class MedicinaError(Exception):
    """Base class for Medicina Digital errors."""


class ExportPreconditionError(MedicinaError):
    """Raised when a document is exported before a patient is selected."""


class ExportError(MedicinaError):
    """Raised when the export surface fails to produce a document."""
