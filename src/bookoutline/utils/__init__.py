"""Internal helpers for bookoutline."""
