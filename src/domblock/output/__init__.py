"""Output layer: turn ServiceResult into text for stdout/stderr."""
