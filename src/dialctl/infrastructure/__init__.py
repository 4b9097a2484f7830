"""Infrastructure layer — reading command lists from text sources."""
