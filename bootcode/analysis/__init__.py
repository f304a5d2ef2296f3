"""Loop detection and program repair."""
