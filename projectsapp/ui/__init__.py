"""Console user interface for Projects Manager."""
