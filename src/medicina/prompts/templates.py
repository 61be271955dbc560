"""Prompt templates for the text assist."""

REFINE_TEXT = """Refine the following medical text so it is formal and professional, suitable for a {document_label}.
Be concise and ethical. Return only the refined text.

Text: {text}"""

DRAFT_CERTIFICATE = """As a professional medical assistant, write the body of a formal medical certificate.

Diagnosis / clinical picture: {diagnosis}
Additional observations: {observations}
Days off: {days_off}

The text must be highly professional, ethical and suitable for an official document.
Do not include headers or signatures, only the paragraph describing the clinical picture and the justification for the leave."""

DOCUMENT_LABELS = {
    "certificate": "medical certificate",
    "prescription": "prescription",
}
