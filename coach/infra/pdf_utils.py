import io
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle

SECTIONS = (
    ("Training Plan", "training"),
    ("Nutrition Plan", "nutrition"),
    ("Recovery Plan", "recovery"),
)


def _paragraphs(text: str, style):
    """One Paragraph per non-empty line; markdown markers are kept as plain text."""
    return [Paragraph(escape(line.strip()), style) for line in (text or "").splitlines() if line.strip()]


def generate_pdf_for_plan(profile, plan):
    """Generate a PDF with the athlete summary followed by the three plan sections."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=36, leftMargin=36, topMargin=36, bottomMargin=36,
        title="Personalized Training Plan",
    )

    styles = getSampleStyleSheet()
    heading = ParagraphStyle("SectionHeading", parent=styles["Heading2"], textColor=colors.HexColor("#2563EB"))
    body = styles["BodyText"]

    elements = [
        Paragraph("Your Personalized Plan", styles["Title"]),
        Paragraph(escape(str(profile)), styles["Normal"]),
        Paragraph(escape(f"Goal: {profile.goal}"), styles["Normal"]),
        Spacer(1, 16),
    ]
    for title, attr in SECTIONS:
        elements.append(Paragraph(title, heading))
        elements.extend(_paragraphs(getattr(plan, attr), body))
        elements.append(Spacer(1, 12))

    doc.build(elements)
    return buf.getvalue()
