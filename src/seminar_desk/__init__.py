"""
Seminar Desk - desktop client for browsing and registering for seminar sessions.
"""

__version__ = "0.1.0"
