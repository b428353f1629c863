"""Global command filters."""
