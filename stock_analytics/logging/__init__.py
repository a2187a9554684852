"""
Logging configuration and utilities for the analytics core.
"""
from .config import configure_logging, get_analysis_logger, get_logger, get_portfolio_logger

__all__ = ["configure_logging", "get_logger", "get_analysis_logger", "get_portfolio_logger"]
