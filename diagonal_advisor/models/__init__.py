"""Request/response models for strategy evaluation."""
