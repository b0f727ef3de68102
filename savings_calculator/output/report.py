"""Downloadable savings report (plain text and PDF)."""

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from ..cost.calculator import CostComparisonResult, MerchantInput
from ..utils.helpers import format_currency, format_long_date, format_number, format_percentage

logger = logging.getLogger(__name__)


class ReportGenerationError(RuntimeError):
    """Raised when a report document cannot be produced."""


@dataclass(frozen=True)
class ReportBranding:
    """Provider details printed on the report."""

    title: str = "ROOTS FULFILLMENT SAVINGS CALCULATOR REPORT"
    provider_name: str = "Roots"
    website: str = "https://roots-jo.co/"
    contact_url: str = "https://roots-jo.co/#contact"
    currency_symbol: str = "$"
    file_prefix: str = "roots-savings-report"

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ReportBranding":
        """Create from the 'report' section of the main config."""
        report = (config or {}).get("report") or {}
        defaults = cls()
        return cls(
            title=report.get("title", defaults.title),
            provider_name=report.get("provider_name", defaults.provider_name),
            website=report.get("website", defaults.website),
            contact_url=report.get("contact_url", defaults.contact_url),
            currency_symbol=report.get("currency_symbol", defaults.currency_symbol),
            file_prefix=report.get("file_prefix", defaults.file_prefix),
        )


class ReportSink(ABC):
    """Destination for report content.

    The report is written once as a sequence of calls; each sink decides
    how lines and pages are laid out.
    """

    @abstractmethod
    def title(self, text: str, generated: str) -> None:
        """Document title and generation date."""

    @abstractmethod
    def section(self, title: str) -> None:
        """Start a top-level section."""

    @abstractmethod
    def group(self, title: str) -> None:
        """Start a sub-group inside a section (one service, overhead)."""

    @abstractmethod
    def field(self, label: str, value: str, indent: bool = False) -> None:
        """Labelled value."""

    @abstractmethod
    def end_group(self) -> None:
        """Close the current sub-group."""

    @abstractmethod
    def footer(self, lines: List[str]) -> None:
        """Closing lines."""

    @abstractmethod
    def render(self) -> Union[str, bytes]:
        """Produce the finished document."""


class TextReportSink(ReportSink):
    """Line-oriented plain text layout."""

    RULE = "═" * 59
    UNDERLINE = "─" * 59
    LABEL_WIDTH = 26
    GROUP_LABEL_WIDTH = 15

    def __init__(self):
        self.lines: List[str] = []

    def _separator(self) -> None:
        if self.lines and self.lines[-1] != "":
            self.lines.append("")
        self.lines.extend([self.RULE, ""])

    def title(self, text: str, generated: str) -> None:
        self.lines.extend([text, f"Generated: {generated}"])

    def section(self, title: str) -> None:
        self._separator()
        self.lines.extend([title, self.UNDERLINE])

    def group(self, title: str) -> None:
        self.lines.append(f"{title}:")

    def field(self, label: str, value: str, indent: bool = False) -> None:
        if indent:
            self.lines.append(f"  {label + ':':<{self.GROUP_LABEL_WIDTH}}{value}")
        else:
            self.lines.append(f"{label + ':':<{self.LABEL_WIDTH}}{value}")

    def end_group(self) -> None:
        self.lines.append("")

    def footer(self, lines: List[str]) -> None:
        self._separator()
        self.lines.extend(lines)

    def render(self) -> str:
        return "\n".join(self.lines) + "\n"


class PdfReportSink(ReportSink):
    """Paginated PDF layout built with reportlab platypus."""

    def __init__(self, pagesize=A4):
        self.pagesize = pagesize
        styles = getSampleStyleSheet()
        self.styles = {
            "title": ParagraphStyle(
                "ReportTitle",
                parent=styles["Heading1"],
                fontSize=16,
                spaceAfter=6,
                textColor=colors.HexColor("#1F4E79"),
            ),
            "section": ParagraphStyle(
                "ReportSection",
                parent=styles["Heading2"],
                fontSize=12,
                spaceBefore=10,
                spaceAfter=4,
                textColor=colors.HexColor("#1F4E79"),
            ),
            "group": ParagraphStyle(
                "ReportGroup",
                parent=styles["Normal"],
                fontName="Helvetica-Bold",
                spaceBefore=4,
            ),
            "body": styles["Normal"],
            "indented": ParagraphStyle(
                "ReportIndented",
                parent=styles["Normal"],
                leftIndent=12,
            ),
        }
        self.story: List[Any] = []

    def _paragraph(self, text: str, style: str) -> None:
        self.story.append(Paragraph(escape(text), self.styles[style]))

    def title(self, text: str, generated: str) -> None:
        self._paragraph(text, "title")
        self._paragraph(f"Generated: {generated}", "body")

    def section(self, title: str) -> None:
        self.story.append(Spacer(1, 6))
        self._paragraph(title, "section")

    def group(self, title: str) -> None:
        self._paragraph(f"{title}:", "group")

    def field(self, label: str, value: str, indent: bool = False) -> None:
        self._paragraph(f"{label}: {value}", "indented" if indent else "body")

    def end_group(self) -> None:
        self.story.append(Spacer(1, 3))

    def footer(self, lines: List[str]) -> None:
        self.story.append(Spacer(1, 14))
        for line in lines:
            self._paragraph(line, "body")

    def render(self) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.pagesize,
            topMargin=0.75 * inch,
            bottomMargin=0.75 * inch,
        )
        try:
            doc.build(self.story)
        except Exception as e:
            raise ReportGenerationError(f"Failed to build PDF report: {e}") from e
        return buffer.getvalue()


class SavingsReport:
    """Format a comparison result for export.

    Only formats values already present on the result; nothing is
    recalculated here.
    """

    def __init__(
        self,
        merchant_input: MerchantInput,
        result: CostComparisonResult,
        branding: Optional[ReportBranding] = None,
        generated_at: Optional[date] = None
    ):
        """Initialize the report.

        Args:
            merchant_input: Inputs the result was computed from
            result: Comparison result to format
            branding: Provider details (defaults to Roots)
            generated_at: Report date (defaults to today)
        """
        self.merchant_input = merchant_input
        self.result = result
        self.branding = branding or ReportBranding()
        self.generated_at = generated_at or date.today()

    def _money(self, amount: float) -> str:
        return format_currency(amount, self.branding.currency_symbol)

    def write(self, sink: ReportSink) -> Union[str, bytes]:
        """Write the report to a sink and return the rendered document."""
        provider = self.branding.provider_name
        result = self.result
        merchant_input = self.merchant_input

        sink.title(self.branding.title, format_long_date(self.generated_at))

        sink.section("BUSINESS INPUTS")
        sink.field("Warehouse Size", f"{format_number(merchant_input.warehouse_size, 3)} sqm")
        sink.field("Orders per Month", format_number(merchant_input.orders_per_month, 3))
        sink.field("Average Items per Order", f"{merchant_input.average_items_per_order:.1f}")
        sink.field("Package Selected", result.package_config.label)

        sink.section("COST BREAKDOWN")
        for line in result.service_savings():
            sink.group(line.service.label)
            sink.field("Your Cost", self._money(line.merchant_cost), indent=True)
            sink.field(f"{provider} Cost", self._money(line.alternate_cost), indent=True)
            sink.field(
                "Savings",
                f"{self._money(line.savings)} ({format_percentage(line.savings_pct)})",
                indent=True,
            )
            sink.end_group()

        sink.group("Overhead")
        sink.field("Your Cost", self._money(result.merchant.overhead), indent=True)
        sink.field(f"{provider} Cost", self._money(result.alternate.overhead), indent=True)

        sink.section("TOTAL COSTS")
        sink.field("Your Total Monthly Cost", self._money(result.merchant.total))
        sink.field(f"{provider} Total Monthly Cost", self._money(result.alternate.total))

        sink.section("SAVINGS SUMMARY")
        sink.field("Monthly Savings", self._money(result.savings.monthly))
        sink.field("Yearly Savings", self._money(result.savings.yearly))
        sink.field("Savings Percentage", format_percentage(result.savings.percentage))

        sink.footer([
            f"For more information, visit: {self.branding.website}",
            f"Contact us: {self.branding.contact_url}",
        ])

        return sink.render()

    def to_text(self) -> str:
        """Render as plain text."""
        return self.write(TextReportSink())

    def to_pdf(self) -> bytes:
        """Render as PDF bytes.

        Raises:
            ReportGenerationError: If the PDF cannot be built
        """
        return self.write(PdfReportSink())

    def default_filename(self, extension: str = "pdf") -> str:
        """File name such as 'roots-savings-report-2026-10-19.pdf'."""
        return f"{self.branding.file_prefix}-{self.generated_at.isoformat()}.{extension.lstrip('.')}"

    def save(self, output_path: Union[str, Path]) -> Path:
        """Write the report to disk; format follows the file extension.

        Args:
            output_path: Destination ending in .txt or .pdf

        Returns:
            Path to the written file
        """
        output_path = Path(output_path)
        suffix = output_path.suffix.lower()

        if suffix == ".txt":
            output_path.write_text(self.to_text(), encoding="utf-8")
        elif suffix == ".pdf":
            output_path.write_bytes(self.to_pdf())
        else:
            raise ValueError(f"Unsupported report format: {suffix}")

        logger.info(f"Savings report saved to {output_path}")
        return output_path
