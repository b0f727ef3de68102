"""Output generation modules."""

from .excel_generator import ExcelGenerator
from .report import PdfReportSink, ReportBranding, ReportGenerationError, SavingsReport, TextReportSink

__all__ = [
    "ExcelGenerator",
    "PdfReportSink",
    "ReportBranding",
    "ReportGenerationError",
    "SavingsReport",
    "TextReportSink",
]
