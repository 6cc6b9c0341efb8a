"""Outbound adapters for hosted vector indexes."""
