"""Kernel – error hierarchy and the access-control domain model."""
