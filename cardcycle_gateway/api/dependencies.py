"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from cardcycle_gateway.config import settings
from cardcycle_gateway.domain.models import DueDateRule


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_due_date_rule() -> DueDateRule:
    """Provide the configured due-date month rule"""
    return settings.due_date_rule
