"""Identity domain model."""
