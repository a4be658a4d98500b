"""Orders backend: lifecycle, promotions and analytics."""
