"""Moderation commands."""
