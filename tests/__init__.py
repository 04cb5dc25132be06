"""
Test suite for Matrix Reorder.

This package contains all tests organized by component:
- test_algorithms/: Tests for normalization, statistics and reordering
- test_services/: Tests for the store, reorder service and view projection
- test_utils/: Tests for loading, logging and configuration
- test_rendering/: Tests for SVG output
- test_panel_app/: Tests for the dashboard component
"""
