"""Utility modules for Seminar Desk."""
