"""Console reporting and external tool lookup."""
