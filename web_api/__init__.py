"""HTTP API for the course catalog."""
