"""Domain services imported by HTTP routes and socket handlers."""
