"""Application layer – export use case and file storage ports."""
