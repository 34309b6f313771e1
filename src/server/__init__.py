"""HTTP API for bookoutline."""
