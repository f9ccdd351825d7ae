"""woopflow: RAGFlow facade with WOOP coaching report generation."""

__version__ = "0.1.0"
