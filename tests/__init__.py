"""
Tests for Hue Root Growth

This package contains tests for:
- Poisson disk sampling and field construction
- The SpatialHash radius index
- Root growth ticks, seeding and configuration updates
- Forest analysis, the pacing driver and the CLI
"""
