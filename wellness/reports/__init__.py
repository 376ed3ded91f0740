# -*- coding: utf-8 -*-
"""
Export of wellness entries (CSV, PDF).
"""

from .csv_export import CSV_HEADER, export_csv
from .pdf_generator import PDFReportGenerator, export_pdf

__all__ = [
    'CSV_HEADER',
    'PDFReportGenerator',
    'export_csv',
    'export_pdf',
]
