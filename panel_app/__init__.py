"""Panel dashboard for Matrix Reorder."""
