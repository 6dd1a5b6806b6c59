"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Graph seed storage (CSV files)
- Route computation (Dijkstra)
"""
