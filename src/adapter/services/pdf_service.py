"""ReportLab PDF Generation Service Implementation

Implements tax invoice rendering using ReportLab library.
"""

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.app.use_cases.invoicing.dtos import InvoiceDetailDTO
from src.domain.base import utcnow
from src.domain.invoice import TaxJurisdiction
from src.domain.product import DEFAULT_HSN_CODE
from src.domain.tax import round_money

CURRENCY = "INR"


def _money(value) -> str:
    return f"{CURRENCY} {round_money(value):,.2f}"


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Lays out a GST tax invoice: issuer header, bill-to block, item table
    with HSN codes and the CGST/SGST or IGST breakdown. Amounts are
    rounded to two places for display only.
    """

    def generate_invoice(
        self,
        invoice: InvoiceDetailDTO,
        company_name: str,
        company_address: str,
    ) -> bytes:
        """
        Generate a tax invoice PDF

        Args:
            invoice: Materialized invoice with client and item details
            company_name: Company name to display on invoice
            company_address: Company address to display on invoice

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=15 * mm,
            leftMargin=15 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=invoice.invoice_number,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=10,
            textColor=colors.HexColor("#2C3E50"),
        )
        invoice_style = ParagraphStyle(
            "InvoiceStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor("#2980B9"),
            spaceAfter=16,
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#7F8C8D"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        small_style = ParagraphStyle(
            "SmallStyle",
            parent=styles["Normal"],
            fontSize=8,
            textColor=colors.HexColor("#666666"),
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        # Header - Company Info and TAX INVOICE label
        elements.append(Paragraph(escape(company_name), title_style))
        elements.append(Paragraph(escape(company_address), header_style))
        elements.append(Spacer(1, 8 * mm))
        elements.append(Paragraph("TAX INVOICE", invoice_style))

        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Invoice Date:", invoice.invoice_date.strftime("%d %b %Y")],
            ["Due Date:", invoice.due_date.strftime("%d %b %Y")],
            ["Status:", invoice.status.upper()],
            ["Supply:", invoice.tax_jurisdiction],
        ]
        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(invoice_table)
        elements.append(Spacer(1, 8 * mm))

        # Bill To
        elements.append(Paragraph("Bill To:", bold_style))
        for line in self._client_lines(invoice):
            elements.append(Paragraph(escape(line), normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Items
        item_data = [["#", "Product", "Size", "Qty", "Unit Price", "HSN", "Total"]]
        for index, item in enumerate(invoice.items, start=1):
            product = escape(item.product_name or f"Product {item.product_id}")
            if item.product_description:
                product += f"<br/><font size=7>{escape(item.product_description)}</font>"
            item_data.append(
                [
                    str(index),
                    Paragraph(product, normal_style),
                    item.size,
                    str(item.quantity),
                    _money(item.unit_price),
                    str(item.hsn_code or DEFAULT_HSN_CODE),
                    _money(item.line_total),
                ]
            )

        item_table = Table(
            item_data,
            colWidths=[8 * mm, 55 * mm, 20 * mm, 12 * mm, 30 * mm, 15 * mm, 35 * mm],
            repeatRows=1,
        )
        item_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 9),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (3, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    # Grid
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(item_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals
        totals_data = [["Subtotal:", _money(invoice.subtotal)]]
        if invoice.tax_jurisdiction == TaxJurisdiction.IN_STATE.value:
            totals_data.append(["CGST (2.5%):", _money(invoice.cgst)])
            totals_data.append(["SGST (2.5%):", _money(invoice.sgst)])
        else:
            totals_data.append(["IGST (5%):", _money(invoice.igst)])
        totals_data.append(["Total Tax:", _money(invoice.total_tax)])
        totals_data.append(["Total Amount:", _money(invoice.total_amount)])

        totals_table = Table(totals_data, colWidths=[40 * mm, 40 * mm], hAlign="RIGHT")
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                    ("LINEABOVE", (0, -1), (-1, -1), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)
        elements.append(Spacer(1, 10 * mm))

        if invoice.notes:
            elements.append(Paragraph("Notes:", bold_style))
            elements.append(Paragraph(escape(invoice.notes), normal_style))
            elements.append(Spacer(1, 10 * mm))

        # Footer
        elements.append(Paragraph("Thank you for your business!", small_style))
        elements.append(
            Paragraph(
                "This is a computer-generated invoice and does not require a signature.",
                small_style,
            )
        )
        elements.append(
            Paragraph(f"Generated on {utcnow().strftime('%d %b %Y')}", small_style)
        )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    @staticmethod
    def _client_lines(invoice: InvoiceDetailDTO) -> list:
        client = invoice.client
        if client is None:
            return ["Unknown client"]

        lines = [client.name, client.email, client.phone]
        if client.gst_number:
            lines.append(f"GST: {client.gst_number}")
        if client.pan_number:
            lines.append(f"PAN: {client.pan_number}")

        address = client.address or {}
        if address.get("street"):
            lines.append(address["street"])
        locality = " ".join(
            part for part in (
                f"{address['city']}," if address.get("city") else "",
                address.get("state") or "",
                address.get("zip_code") or "",
            ) if part
        )
        if locality:
            lines.append(locality)
        if address.get("country"):
            lines.append(address["country"])
        return lines
