"""
Domain exceptions raised by the analysis services.
Routes translate them into HTTP errors.
"""


class AnalysisError(Exception):
    """Base class for errors that abort an analysis request."""


class InvalidURLError(AnalysisError):
    """The submitted URL cannot be parsed after protocol normalization."""


class ScrapeError(AnalysisError):
    """The target page could not be fetched."""


class NoContentError(AnalysisError):
    """The fetched page has no HTML to analyze."""
