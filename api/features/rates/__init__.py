"""Exchange rates feature package: live provider pass-through with a static fallback table."""
