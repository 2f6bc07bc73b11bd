"""Application layer: use-case services and result DTOs."""
