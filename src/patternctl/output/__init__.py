"""Output layer — turns ServiceResult into human, quiet, or JSON text."""
