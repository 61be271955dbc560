"""Document composition, rendering and export.

Usage:
    from medicina.documents import compose_certificate, render_html, resolve_header

    header = resolve_header(hospital, store.settings)
    document = compose_certificate(header, patient, doctor, text, PaperSize.A5)
    page = render_html(document)
"""

from .composer import (
    ComposedDocument,
    DocumentBody,
    DocumentKind,
    PageLayout,
    PaperSize,
    SignatureBlock,
    compose_certificate,
    compose_document,
    compose_prescription,
    format_long_date,
)
from .export import export_filename, render_pdf, require_patient
from .header import DocumentHeader, resolve_header
from .render import render_html

__all__ = [
    # Header
    "DocumentHeader",
    "resolve_header",
    # Composition
    "ComposedDocument",
    "DocumentBody",
    "DocumentKind",
    "PageLayout",
    "PaperSize",
    "SignatureBlock",
    "compose_certificate",
    "compose_prescription",
    "compose_document",
    "format_long_date",
    # Surfaces
    "render_html",
    "render_pdf",
    "export_filename",
    "require_patient",
]
