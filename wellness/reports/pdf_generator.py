# -*- coding: utf-8 -*-
"""
PDF export of wellness entries.

A title block with the date range and headline numbers, followed by a
fixed-width table that continues across pages with its header repeated.
"""

from __future__ import annotations

from datetime import date
from io import BytesIO
from typing import List, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..entries.models import Entry
from ..errors import ValidationError
from ..insights.summary import summarize

PDF_FILENAME = "wellness_entries.pdf"
TABLE_HEADER = ["Date", "Steps", "Sleep", "Mood", "Notes"]
COLUMN_WIDTHS_MM = [30, 25, 25, 25, 85]


class PDFReportGenerator:
    """Builds the entries report with reportlab platypus."""

    def __init__(self, font_name: str = "Helvetica") -> None:
        self.font_name = font_name
        self._setup_styles()

    def _setup_styles(self) -> None:
        self.styles = getSampleStyleSheet()
        self.styles.add(ParagraphStyle(
            name='ReportTitle',
            fontName=self.font_name,
            fontSize=20,
            leading=24,
            spaceAfter=8,
        ))
        self.styles.add(ParagraphStyle(
            name='ReportBody',
            fontName=self.font_name,
            fontSize=12,
            leading=16,
        ))
        self.styles.add(ParagraphStyle(
            name='ReportCell',
            fontName=self.font_name,
            fontSize=10,
            leading=12,
        ))

    def generate(
        self,
        entries: Sequence[Entry],
        start: Optional[date] = None,
        end: Optional[date] = None,
        output_path: Optional[str] = None,
    ) -> bytes:
        """
        Render the report.

        Args:
            entries: rows, in display order
            start, end: the filter window shown in the header
            output_path: also write the PDF there when given

        Returns:
            bytes: PDF content
        """
        if not entries:
            raise ValidationError("No entries to export")

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=14*mm,
            rightMargin=14*mm,
            topMargin=14*mm,
            bottomMargin=14*mm,
            title="Wellness Tracker Entries",
        )

        story: List = []
        story.extend(self._build_header(entries, start, end))
        story.append(self._build_table(entries))
        doc.build(story)

        pdf_content = buffer.getvalue()
        buffer.close()

        if output_path:
            with open(output_path, 'wb') as f:
                f.write(pdf_content)

        return pdf_content

    def _build_header(self, entries: Sequence[Entry], start: Optional[date], end: Optional[date]) -> List:
        summary = summarize(entries)
        start_label = start.isoformat() if start else "Beginning"
        end_label = end.isoformat() if end else "Today"
        return [
            Paragraph("Wellness Tracker Entries", self.styles['ReportTitle']),
            Paragraph(f"Date Range: {start_label} to {end_label}", self.styles['ReportBody']),
            Spacer(1, 6),
            Paragraph(f"Total Steps: {summary.total_steps_display}", self.styles['ReportBody']),
            Paragraph(f"Average Sleep: {summary.average_sleep_display} hours", self.styles['ReportBody']),
            Spacer(1, 10),
        ]

    def _build_table(self, entries: Sequence[Entry]) -> Table:
        cell = self.styles['ReportCell']
        data: List[List] = [TABLE_HEADER]
        for e in entries:
            data.append([
                e.date.isoformat(),
                str(e.steps),
                f"{e.sleep:g}",
                e.mood.value,
                # Wrap long notes inside the fixed column.
                Paragraph(_escape(e.notes or ""), cell),
            ])

        table = Table(data, colWidths=[w*mm for w in COLUMN_WIDTHS_MM], repeatRows=1)
        table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, -1), self.font_name),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#ecf0f1')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.HexColor('#2c3e50')),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('LINEBELOW', (0, 0), (-1, 0), 0.5, colors.grey),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 3),
            ('TOPPADDING', (0, 0), (-1, -1), 3),
        ]))
        return table


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def export_pdf(entries: Sequence[Entry], start: Optional[date] = None, end: Optional[date] = None) -> bytes:
    return PDFReportGenerator().generate(entries, start=start, end=end)
