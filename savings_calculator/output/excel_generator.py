"""Generate Excel workbooks comparing every package."""

import logging
from datetime import date
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Union

from openpyxl import Workbook
from openpyxl.chart import BarChart, Reference
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils.dataframe import dataframe_to_rows

from ..config.assumptions import Assumptions
from ..cost.calculator import CostComparisonResult, MerchantInput, SavingsCalculator
from ..cost.packages import PackageType
from ..utils.helpers import format_long_date
from .report_data import build_breakdown_frame, build_package_frame

logger = logging.getLogger(__name__)


class ExcelGenerator:
    """Generate an Excel workbook with a summary, one sheet per package, and assumptions."""

    # Style definitions
    HEADER_FILL = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
    HEADER_FONT = Font(color="FFFFFF", bold=True, size=11)
    SAVINGS_FILL = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")
    LOSS_FILL = PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid")
    CURRENCY_FORMAT = "$#,##0.00"
    PERCENT_FORMAT = "0.0%"
    THIN_BORDER = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    def __init__(self, output: Union[str, Path, BinaryIO]):
        """Initialize the generator.

        Args:
            output: Path for the output Excel file, or a writable binary buffer
        """
        self.output = Path(output) if isinstance(output, (str, Path)) else output
        self.workbook = Workbook()
        # Remove default sheet
        self.workbook.remove(self.workbook.active)

    def generate(
        self,
        merchant_input: MerchantInput,
        calculator: SavingsCalculator,
        results: Optional[Dict[PackageType, CostComparisonResult]] = None,
        generated_at: Optional[date] = None
    ) -> Union[Path, BinaryIO]:
        """Generate the complete workbook.

        Args:
            merchant_input: Inputs the results were computed from
            calculator: Calculator holding the assumptions in effect
            results: Pre-computed results (computed for every package if omitted)
            generated_at: Date printed on the summary sheet

        Returns:
            Path (or buffer) the workbook was written to
        """
        if results is None:
            results = calculator.compare_packages(merchant_input)

        self._create_summary_sheet(merchant_input, calculator, results, generated_at or date.today())
        for package, result in results.items():
            self._create_package_sheet(package, result)
        self._create_assumptions_sheet(calculator.assumptions)

        self.workbook.save(self.output)
        logger.info(f"Excel report saved to {self.output}")
        return self.output

    def _write_header_row(self, ws, row: int, headers) -> None:
        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=row, column=col, value=header)
            cell.fill = self.HEADER_FILL
            cell.font = self.HEADER_FONT
            cell.border = self.THIN_BORDER

    def _create_summary_sheet(
        self,
        merchant_input: MerchantInput,
        calculator: SavingsCalculator,
        results: Dict[PackageType, CostComparisonResult],
        generated_at: date
    ) -> None:
        """Create the Summary sheet."""
        ws = self.workbook.create_sheet("Summary")

        # Title
        ws["A1"] = "Fulfillment Savings Comparison"
        ws["A1"].font = Font(size=16, bold=True)
        ws.merge_cells("A1:F1")

        ws["A2"] = f"Generated: {format_long_date(generated_at)}"
        ws["A2"].font = Font(italic=True)

        # Business inputs
        row = 4
        ws.cell(row=row, column=1, value="Business Inputs").font = Font(bold=True, size=12)
        row += 1

        inputs = [
            ("Warehouse Size (sqm)", merchant_input.warehouse_size),
            ("Orders per Month", merchant_input.orders_per_month),
            ("Average Items per Order", merchant_input.average_items_per_order),
        ]
        for label, value in inputs:
            ws.cell(row=row, column=1, value=label).font = Font(bold=True)
            ws.cell(row=row, column=2, value=value)
            row += 1

        # Package comparison
        row += 1
        ws.cell(row=row, column=1, value="Package Comparison").font = Font(bold=True, size=12)
        row += 1

        frame = build_package_frame(calculator, results)
        headers = ["Package", "Your Monthly Cost", "Roots Monthly Cost",
                   "Monthly Savings", "Yearly Savings", "Savings %"]
        self._write_header_row(ws, row, headers)
        header_row = row
        row += 1

        for _, summary in frame.iterrows():
            ws.cell(row=row, column=1, value=summary["label"])
            for col, key in enumerate(["merchant_total", "roots_total", "monthly_savings", "yearly_savings"], 2):
                cell = ws.cell(row=row, column=col, value=float(summary[key]))
                cell.number_format = self.CURRENCY_FORMAT
            cell = ws.cell(row=row, column=6, value=float(summary["savings_pct"]) / 100)
            cell.number_format = self.PERCENT_FORMAT
            cell.fill = self.SAVINGS_FILL if summary["monthly_savings"] >= 0 else self.LOSS_FILL
            row += 1

        last_row = row - 1

        # Monthly cost comparison chart
        if last_row > header_row:
            chart = BarChart()
            chart.type = "col"
            chart.style = 10
            chart.title = "Monthly Cost by Package"
            chart.y_axis.title = "Monthly Cost ($)"

            data_ref = Reference(ws, min_col=2, max_col=3, min_row=header_row, max_row=last_row)
            cats = Reference(ws, min_col=1, min_row=header_row + 1, max_row=last_row)
            chart.add_data(data_ref, titles_from_data=True)
            chart.set_categories(cats)

            ws.add_chart(chart, f"A{last_row + 3}")

        # Adjust column widths
        ws.column_dimensions["A"].width = 28
        for letter in ["B", "C", "D", "E"]:
            ws.column_dimensions[letter].width = 20
        ws.column_dimensions["F"].width = 12

    def _create_package_sheet(self, package: PackageType, result: CostComparisonResult) -> None:
        """Create the cost breakdown sheet for one package."""
        ws = self.workbook.create_sheet(package.short_label)

        ws["A1"] = package.label
        ws["A1"].font = Font(size=14, bold=True)
        ws["A2"] = package.config.description
        ws["A2"].font = Font(italic=True)

        frame = build_breakdown_frame(result, include_totals=True)
        start_row = 4

        for offset, values in enumerate(dataframe_to_rows(frame, index=False, header=True)):
            row = start_row + offset
            if offset == 0:
                self._write_header_row(ws, row, values)
                continue

            for col, value in enumerate(values, 1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = self.THIN_BORDER
                if col in (2, 3, 4):
                    cell.number_format = self.CURRENCY_FORMAT
                elif col == 5:
                    cell.value = value / 100
                    cell.number_format = self.PERCENT_FORMAT

            if values[0] == "Total":
                for col in range(1, len(values) + 1):
                    ws.cell(row=row, column=col).font = Font(bold=True)

        summary_row = start_row + len(frame) + 2
        ws.cell(row=summary_row, column=1, value="Yearly Savings").font = Font(bold=True)
        cell = ws.cell(row=summary_row, column=2, value=result.savings.yearly)
        cell.number_format = self.CURRENCY_FORMAT

        ws.column_dimensions["A"].width = 18
        for letter in ["B", "C", "D"]:
            ws.column_dimensions[letter].width = 16
        ws.column_dimensions["E"].width = 12
        ws.freeze_panes = f"A{start_row + 1}"

    def _create_assumptions_sheet(self, assumptions: Assumptions) -> None:
        """Create the Assumptions sheet."""
        ws = self.workbook.create_sheet("Assumptions")

        self._write_header_row(ws, 1, ["Section", "Assumption", "Value"])

        row = 2
        for section, values in assumptions.to_dict().items():
            for key, value in values.items():
                ws.cell(row=row, column=1, value=section.replace("_", " ").title())
                ws.cell(row=row, column=2, value=key.replace("_", " ").capitalize())
                ws.cell(row=row, column=3, value=value)
                row += 1

        ws.column_dimensions["A"].width = 16
        ws.column_dimensions["B"].width = 32
        ws.column_dimensions["C"].width = 12
        ws.freeze_panes = "A2"


def generate_excel_report(
    merchant_input: MerchantInput,
    calculator: SavingsCalculator,
    output: Union[str, Path, BinaryIO]
) -> Union[Path, BinaryIO]:
    """Convenience function to generate an Excel report.

    Args:
        merchant_input: Warehouse metrics
        calculator: Calculator with the assumptions to apply
        output: Path or binary buffer for the workbook

    Returns:
        Path (or buffer) the workbook was written to
    """
    generator = ExcelGenerator(output)
    return generator.generate(merchant_input, calculator)
