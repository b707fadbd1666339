"""Application layer: use cases, DTOs, ports and orchestration services."""
