"""Resumen del lead y plantillas de notificación."""

from .summary import (
    CategorySummary,
    PatternSummary,
    LeadSummary,
    build_summary_text,
    build_email_form,
    build_line_form
)
from .email import EMAIL_SUBJECT, render_report_email

__all__ = [
    "CategorySummary",
    "PatternSummary",
    "LeadSummary",
    "build_summary_text",
    "build_email_form",
    "build_line_form",
    "EMAIL_SUBJECT",
    "render_report_email"
]
