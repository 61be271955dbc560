"""PDF export surface.

Renders a ``ComposedDocument`` onto a single A4 or A5 page with reportlab and
names the file after the patient.
"""

from __future__ import annotations

import base64
import io
import logging
import re
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.platypus import HRFlowable, Image, Paragraph, SimpleDocTemplate, Spacer

from ..exceptions import ExportError, ExportPreconditionError
from ..store.models import Patient
from .composer import ComposedDocument, DocumentKind

logger = logging.getLogger(__name__)

FILENAME_PREFIXES = {
    DocumentKind.CERTIFICATE: "Certificate_",
    DocumentKind.PRESCRIPTION: "Prescription_",
}

_SEPARATOR_RUN = re.compile(r"[\W_]+")
_DATA_URI = re.compile(r"^data:image/[\w.+-]+;base64,(?P<payload>.+)$", re.DOTALL)


def export_filename(kind: DocumentKind, patient_name: str, extension: str = "pdf") -> str:
    """Build the download name, e.g. ``Certificate_Ana_Silva.pdf``.

    Runs of non-alphanumeric characters collapse into one underscore.
    """
    slug = _SEPARATOR_RUN.sub("_", patient_name or "").strip("_")
    return f"{FILENAME_PREFIXES[DocumentKind(kind)]}{slug}.{extension}"


def require_patient(patient: Patient | None) -> Patient:
    """Refuse to export a document without a selected patient."""
    if patient is None:
        raise ExportPreconditionError("Please select a patient first.")
    return patient


def _text(value: str) -> str:
    """Escape text for a reportlab Paragraph, keeping line breaks."""
    return escape(value or "").replace("\n", "<br/>")


def _logo_flowable(logo: str, height: float) -> Image | None:
    """Embed a data-URI logo. Remote URLs are not fetched."""
    match = _DATA_URI.match(logo or "")
    if not match:
        if logo:
            logger.info("Skipping non-embedded logo in PDF export")
        return None
    try:
        raw = base64.b64decode(match.group("payload"))
        width_px, height_px = ImageReader(io.BytesIO(raw)).getSize()
    except Exception as e:
        logger.warning("Could not decode logo for PDF export: %s", e)
        return None
    width = width_px * height / height_px if height_px else height
    return Image(io.BytesIO(raw), width=width, height=height)


def _build_styles(document: ComposedDocument) -> dict[str, ParagraphStyle]:
    layout = document.layout
    base = getSampleStyleSheet()
    return {
        "header": ParagraphStyle(
            "Letterhead", parent=base["Title"], fontSize=layout.header_pt,
            leading=layout.header_pt * 1.3, alignment=TA_CENTER, spaceAfter=2,
        ),
        "details": ParagraphStyle(
            "LetterheadDetails", parent=base["Normal"], fontSize=layout.small_pt + 2,
            leading=(layout.small_pt + 2) * 1.4, alignment=TA_CENTER, textColor=colors.HexColor("#475569"),
        ),
        "title": ParagraphStyle(
            "DocumentTitle", parent=base["Title"], fontName="Times-Bold", fontSize=layout.title_pt,
            leading=layout.title_pt * 1.3, alignment=TA_CENTER, spaceBefore=6 * mm, spaceAfter=6 * mm,
        ),
        "body": ParagraphStyle(
            "Body", parent=base["Normal"], fontName="Times-Roman", fontSize=layout.body_pt,
            leading=layout.body_pt * 1.8, alignment=TA_JUSTIFY, firstLineIndent=12 * mm, spaceAfter=4 * mm,
        ),
        "text": ParagraphStyle(
            "FreeText", parent=base["Normal"], fontName="Times-Italic", fontSize=layout.body_pt,
            leading=layout.body_pt * 1.6, textColor=colors.HexColor("#334155"), spaceAfter=4 * mm,
        ),
        "date": ParagraphStyle(
            "DateLine", parent=base["Normal"], fontName="Times-Roman", fontSize=layout.body_pt,
            alignment=TA_RIGHT, spaceBefore=8 * mm,
        ),
        "signature": ParagraphStyle(
            "Signature", parent=base["Normal"], fontName="Helvetica-Bold", fontSize=layout.body_pt + 2,
            leading=(layout.body_pt + 2) * 1.3, alignment=TA_CENTER,
        ),
        "license": ParagraphStyle(
            "License", parent=base["Normal"], fontSize=layout.small_pt + 2, alignment=TA_CENTER,
            textColor=colors.HexColor("#475569"),
        ),
        "footer": ParagraphStyle(
            "Footer", parent=base["Normal"], fontSize=layout.small_pt, alignment=TA_CENTER,
            textColor=colors.HexColor("#94a3b8"), spaceBefore=6 * mm,
        ),
    }


def _story(document: ComposedDocument) -> list:
    styles = _build_styles(document)
    layout = document.layout
    header = document.letterhead
    story: list = []

    logo = _logo_flowable(header.logo, layout.logo_height_mm * mm)
    if logo is not None:
        story.append(logo)
        story.append(Spacer(1, 3 * mm))
    story.append(Paragraph(_text(header.name.upper()), styles["header"]))
    story.append(Paragraph(f"CNPJ: {_text(header.cnpj)}", styles["details"]))
    story.append(Paragraph(_text(header.address), styles["details"]))
    story.append(Paragraph(f"Tel: {_text(header.phone)}", styles["details"]))
    story.append(HRFlowable(width="100%", thickness=0.5, color=colors.HexColor("#cbd5e1"), spaceBefore=4 * mm))

    story.append(Paragraph(_text(document.title), styles["title"]))
    story.append(Paragraph(_text(document.body.opening), styles["body"]))
    if document.body.has_content:
        story.append(Paragraph(_text(document.body.text), styles["text"]))

    date_line = document.date_line
    if document.reference:
        date_line = f"{date_line}  REF: {document.reference}".strip()
    if date_line:
        story.append(Paragraph(_text(date_line), styles["date"]))

    story.append(Spacer(1, 20 * mm))
    story.append(HRFlowable(width="45%", thickness=1, color=colors.black, spaceAfter=2 * mm))
    story.append(Paragraph(_text(document.signature.name), styles["signature"]))
    story.append(Paragraph(_text(document.signature.license_line), styles["license"]))
    story.append(Paragraph(_text(document.footer), styles["footer"]))
    return story


def render_pdf(document: ComposedDocument) -> bytes:
    """Render *document* to PDF bytes.

    Raises:
        ExportError: If reportlab fails to lay out or write the document.
    """
    layout = document.layout
    margin = layout.padding_mm * mm
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=(layout.width_mm * mm, layout.height_mm * mm),
        topMargin=margin,
        bottomMargin=margin,
        leftMargin=margin,
        rightMargin=margin,
        title=document.title,
    )
    try:
        doc.build(_story(document))
    except Exception as e:
        logger.error("PDF export failed: %s", e)
        raise ExportError(f"Failed to generate the PDF: {e}") from e
    return buf.getvalue()
