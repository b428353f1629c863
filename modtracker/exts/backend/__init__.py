"""Backend extensions."""
