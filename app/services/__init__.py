"""
Service module containing business logic and storage integration
"""
from .analysis_core import AnalysisService
from .analytics_service import AnalyticsService
from .lead_service import LeadService
from .report_service import ReportService

__all__ = ["AnalysisService", "AnalyticsService", "LeadService", "ReportService"]
