"""Common Ports."""

from apps.armory.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
