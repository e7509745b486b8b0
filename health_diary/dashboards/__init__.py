"""Role-restricted dashboards for doctors and patients."""
