"""Service layer for community service search."""
