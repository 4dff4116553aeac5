"""Reference tables and record types."""
