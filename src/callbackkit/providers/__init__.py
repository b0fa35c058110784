"""Collaborator providers."""
