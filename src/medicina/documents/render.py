"""HTML preview and print surface.

Produces a self-contained page sized with ``@page`` so the browser's print
dialog lays the document out on the chosen paper. No external assets.
"""

from __future__ import annotations

import html

from .composer import ComposedDocument, DocumentKind

ACCENTS = {
    DocumentKind.CERTIFICATE: "#2563eb",
    DocumentKind.PRESCRIPTION: "#10b981",
}


def _e(text: str | None) -> str:
    """HTML-escape text."""
    return html.escape(str(text)) if text else ""


def _build_css(document: ComposedDocument) -> str:
    layout = document.layout
    accent = ACCENTS[document.kind]
    return f"""
@page {{ size: {layout.paper_size.value}; margin: 0; }}
* {{ box-sizing: border-box; }}
body {{ margin: 0; background: #f1f5f9; font-family: Georgia, "Times New Roman", serif; color: #0f172a; }}
.page {{
    width: {layout.width_mm}mm;
    min-height: {layout.height_mm}mm;
    padding: {layout.padding_mm}mm;
    margin: 0 auto;
    background: #fff;
    border-top: 4px solid {accent};
    display: flex;
    flex-direction: column;
    justify-content: space-between;
}}
.letterhead {{ text-align: center; border-bottom: 1px solid #e2e8f0; padding-bottom: 6mm; }}
.letterhead img {{ height: {layout.logo_height_mm}mm; filter: grayscale(1); }}
.letterhead h1 {{ font-size: {layout.header_pt}pt; text-transform: uppercase; letter-spacing: .12em; margin: 2mm 0; }}
.letterhead p {{ font-size: {layout.small_pt + 2}pt; color: #475569; margin: .5mm 0; }}
h2.title {{ font-size: {layout.title_pt}pt; text-align: center; text-decoration: underline; margin: 8mm 0; }}
.body {{ font-size: {layout.body_pt}pt; line-height: 1.8; text-align: justify; }}
.body .opening {{ text-indent: 12mm; }}
.body .text {{ white-space: pre-line; font-style: italic; color: #334155; }}
.body .hint {{ color: #94a3b8; font-style: italic; text-align: center; padding: 10mm 0; }}
.body .date {{ text-align: right; padding-top: 8mm; }}
.signature {{ text-align: center; margin-top: 15mm; }}
.signature .line {{ width: 45%; margin: 0 auto; border-top: 1px solid #0f172a; padding-top: 2mm; }}
.signature .name {{ font-weight: bold; font-size: {layout.body_pt + 2}pt; }}
.signature .license {{ font-size: {layout.small_pt + 2}pt; color: #475569; }}
.footer {{ font-size: {layout.small_pt}pt; color: #94a3b8; text-align: center; margin-top: 6mm; }}
@media print {{ body {{ background: #fff; }} .page {{ border-top: none; }} }}
"""


def _letterhead(document: ComposedDocument) -> str:
    header = document.letterhead
    logo = f'<img src="{_e(header.logo)}" alt="Logo">' if header.logo else ""
    return (
        '<header class="letterhead">'
        f"{logo}"
        f"<h1>{_e(header.name)}</h1>"
        f"<p>CNPJ: {_e(header.cnpj)}</p>"
        f"<p>{_e(header.address)}</p>"
        f"<p>Tel: {_e(header.phone)}</p>"
        "</header>"
    )


def _body(document: ComposedDocument) -> str:
    body = document.body
    parts = [f'<p class="opening">{_e(body.opening)}</p>']
    if body.has_content:
        parts.append(f'<div class="text">{_e(body.text)}</div>')
    else:
        parts.append(f'<p class="hint">{_e(body.hint)}</p>')

    # Same date/reference line as the PDF export, with or without content.
    date_line = _e(document.date_line)
    if document.reference:
        ref = f"REF: {_e(document.reference)}"
        date_line = f"{date_line} &middot; {ref}" if date_line else ref
    if date_line:
        parts.append(f'<p class="date">{date_line}</p>')
    return '<section class="body">' + "".join(parts) + "</section>"


def render_html(document: ComposedDocument) -> str:
    """Render *document* as a standalone HTML page."""
    signature = document.signature
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{_e(document.title)}</title>
<style>{_build_css(document)}</style>
</head>
<body>
<article class="page paper-{document.layout.paper_size.value.lower()}">
<div>
{_letterhead(document)}
<h2 class="title">{_e(document.title)}</h2>
{_body(document)}
</div>
<footer>
<div class="signature"><div class="line">
<div class="name">{_e(signature.name)}</div>
<div class="license">{_e(signature.license_line)}</div>
</div></div>
<div class="footer">{_e(document.footer)}</div>
</footer>
</article>
</body>
</html>
"""
