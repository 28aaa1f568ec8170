"""Lease analysis DTO."""

from pydantic import BaseModel


class LeaseAnalysisDTO(BaseModel):
    analysis: str
    degraded: bool = False
