"""Core business logic for the course catalog service."""
