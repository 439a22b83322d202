"""Core domain: models, repositories, schemas, services."""
