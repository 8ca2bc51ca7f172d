"""Infrastructure: database engine wiring and persistence backends."""
