"""Core data structures: union-find, percolation grid and configuration."""
