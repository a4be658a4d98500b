"""Business rules and orchestration services."""
