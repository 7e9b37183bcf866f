from application.reporting.report_formatter import format_report

__all__ = ["format_report"]
