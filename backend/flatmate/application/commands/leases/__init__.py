"""Lease commands."""

from flatmate.application.commands.leases.analyze_lease import (
    AnalyzeLeaseCommand,
    AnalyzeLeaseHandler,
    AnalyzeLeaseResult,
)

__all__ = ["AnalyzeLeaseCommand", "AnalyzeLeaseHandler", "AnalyzeLeaseResult"]
