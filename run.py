#!/usr/bin/env python3
"""CLI entry point for the Fulfillment Savings Calculator."""

import argparse
import logging
import sys
from pathlib import Path

from savings_calculator.config.assumptions import AssumptionsError, load_assumptions
from savings_calculator.cost.calculator import SavingsCalculator
from savings_calculator.cost.packages import PackageType
from savings_calculator.input.form import can_calculate, missing_fields, parse_merchant_input
from savings_calculator.output.excel_generator import ExcelGenerator
from savings_calculator.output.report import ReportBranding, ReportGenerationError, SavingsReport
from savings_calculator.utils.helpers import (
    format_currency,
    format_percentage,
    load_config,
    setup_logging,
)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Fulfillment Savings Calculator - Compare in-house fulfillment costs with Roots"
    )

    parser.add_argument(
        "--warehouse-size", "-w",
        type=str,
        default="0",
        help="Warehouse size in square meters"
    )

    parser.add_argument(
        "--orders-per-month", "-n",
        type=str,
        default="0",
        help="Number of orders per month"
    )

    parser.add_argument(
        "--items-per-order", "-i",
        type=str,
        default="0",
        help="Average number of items per order"
    )

    parser.add_argument(
        "--package", "-p",
        choices=[package.value for package in PackageType],
        default=PackageType.FULFILLMENT.value,
        help="Package to evaluate (default: fulfillment)"
    )

    parser.add_argument(
        "--compare",
        action="store_true",
        help="Print the comparison for every package"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Write a report: .txt or .pdf for the selected package, .xlsx for all packages"
    )

    parser.add_argument(
        "--assumptions",
        type=str,
        help="Path to an assumptions YAML file"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config file"
    )

    parser.add_argument(
        "--dashboard",
        action="store_true",
        help="Launch the Streamlit dashboard instead of calculating"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def print_summary(result, branding: ReportBranding) -> None:
    """Print a one-package summary block."""
    symbol = branding.currency_symbol
    print("\n" + "=" * 60)
    print(result.package_config.label.upper())
    print("=" * 60)
    for line in result.service_savings():
        print(
            f"{line.service.label + ':':<16}"
            f"{format_currency(line.merchant_cost, symbol):>14} -> "
            f"{format_currency(line.alternate_cost, symbol):>12}  "
            f"(-{format_percentage(line.savings_pct)})"
        )
    print(
        f"{'Overhead:':<16}"
        f"{format_currency(result.merchant.overhead, symbol):>14} -> "
        f"{format_currency(result.alternate.overhead, symbol):>12}"
    )
    print("-" * 60)
    print(f"Your Monthly Cost:     {format_currency(result.merchant.total, symbol)}")
    print(f"{branding.provider_name + ' Monthly Cost:':<23}{format_currency(result.alternate.total, symbol)}")
    print(f"Monthly Savings:       {format_currency(result.savings.monthly, symbol)}")
    print(f"Yearly Savings:        {format_currency(result.savings.yearly, symbol)}")
    print(f"Savings Percentage:    {format_percentage(result.savings.percentage)}")
    print("=" * 60)


def run_calculation(args, config) -> int:
    """Run the calculation and optional export.

    Args:
        args: Command line arguments
        config: Main configuration dictionary

    Returns:
        Process exit code
    """
    logger = logging.getLogger("savings_calculator.cli")

    try:
        assumptions = load_assumptions(args.assumptions)
    except (FileNotFoundError, AssumptionsError) as e:
        logger.error(str(e))
        return 1

    merchant_input = parse_merchant_input({
        "warehouse_size": args.warehouse_size,
        "orders_per_month": args.orders_per_month,
        "average_items_per_order": args.items_per_order,
    })

    if not can_calculate(merchant_input):
        logger.error(f"All inputs must be greater than zero. Missing: {', '.join(missing_fields(merchant_input))}")
        return 1

    branding = ReportBranding.from_config(config)
    calculator = SavingsCalculator(assumptions)

    if args.compare:
        results = calculator.compare_packages(merchant_input)
        for result in results.values():
            print_summary(result, branding)
    else:
        print_summary(calculator.calculate(merchant_input, args.package), branding)

    if args.output:
        output_path = Path(args.output)
        logger.info(f"Generating report: {output_path}")
        try:
            if output_path.suffix.lower() == ".xlsx":
                ExcelGenerator(output_path).generate(merchant_input, calculator)
            else:
                result = calculator.calculate(merchant_input, args.package)
                SavingsReport(merchant_input, result, branding).save(output_path)
        except (ValueError, ReportGenerationError, OSError) as e:
            logger.error(f"Failed to write report: {e}")
            return 1
        print(f"\nReport saved to: {output_path}")

    return 0


def launch_dashboard():
    """Launch the Streamlit dashboard."""
    import subprocess
    dashboard_path = Path(__file__).parent / "dashboard" / "app.py"

    if not dashboard_path.exists():
        print(f"Dashboard not found: {dashboard_path}")
        sys.exit(1)

    subprocess.run(["streamlit", "run", str(dashboard_path)])


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    config_error = None
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        config = {}
        config_error = e

    log_config = config.get("logging") or {}
    setup_logging(
        "DEBUG" if args.verbose else log_config.get("level", "INFO"),
        log_config.get("format"),
        log_config.get("file"),
    )
    if config_error:
        logging.getLogger("savings_calculator.cli").warning(f"{config_error}; using defaults")

    if args.dashboard:
        launch_dashboard()
        return

    sys.exit(run_calculation(args, config))


if __name__ == "__main__":
    main()
