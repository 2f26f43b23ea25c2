"""
Qt user interface for Seminar Desk.
"""
