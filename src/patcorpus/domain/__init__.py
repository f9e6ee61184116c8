"""Domain layer: classification model and document types."""
