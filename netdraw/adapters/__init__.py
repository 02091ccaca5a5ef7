"""Adapters layer - Concrete implementations of ports.

This module contains implementations connecting the application to:
- CSV files (rows, networks, travel demand)
- OSM POLY files (clip regions, boundaries)
- Graphics backends (matplotlib)
"""
