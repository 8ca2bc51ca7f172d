"""Domain layer: day arithmetic and repository protocols."""
