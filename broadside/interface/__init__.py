"""Console and text interface for Broadside."""
