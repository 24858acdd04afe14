"""Page-object helpers for walking a dashboard's navigation sidebar."""

__version__ = "0.1.0"
