"""Scheduled jobs."""

from .cost_status_update import register_cost_status_update, cost_status_update

__all__ = [
    "register_cost_status_update",
    "cost_status_update",
]
