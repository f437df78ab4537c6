"""Code shared by the movies API Lambda handlers."""
