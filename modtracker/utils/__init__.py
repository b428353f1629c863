"""General utilities for the entire bot."""
