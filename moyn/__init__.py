"""
moyn - developer microblogging from your terminal.

Publish markdown files as posts, list and delete them, and manage the
spaces they live in.
"""

__version__ = "0.1.0"
__app_name__ = "moyn"
