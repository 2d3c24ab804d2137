"""Adapters for state and external collaborators."""
