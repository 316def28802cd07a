"""Utility functions for pages-deploy"""

from .output import (
    console,
    print_error,
    print_warning,
    print_info,
    print_success,
    format_report,
    format_file_check,
    format_repository_status,
)

__all__ = [
    'console',
    'print_error',
    'print_warning',
    'print_info',
    'print_success',
    'format_report',
    'format_file_check',
    'format_repository_status',
]
