"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses
for the dashboard and for operators.
"""

from src.presentation import controllers

__all__ = ["controllers"]
