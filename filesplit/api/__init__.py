"""HTTP routes for the file split service."""
