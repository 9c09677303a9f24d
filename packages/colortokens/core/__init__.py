"""Core token pipeline: extraction, deduplication, naming and export."""
