"""Accounts – per-account insight handles."""
from insight_logs.accounts.insight import AccountInsight, Insight

__all__ = ["AccountInsight", "Insight"]
