"""Adapters for the message bus ports."""
