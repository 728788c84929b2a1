"""Boundary layer: clients for external HTTP services."""
