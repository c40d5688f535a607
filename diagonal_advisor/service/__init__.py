"""Advisor services."""

from diagonal_advisor.service.advisor import AdvisorService

__all__ = [
    "AdvisorService",
]
