"""Rank an organization's GitHub contributors across all of its repositories."""
