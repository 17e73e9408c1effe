"""Desktop pygame host for PIXELDASH."""
