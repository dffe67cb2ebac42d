"""Core client components - settings, session store, parser and API client."""

from moyn.core.api_client import APIClient, login
from moyn.core.config import ConfigStore, Settings
from moyn.core.frontmatter import build_post, load_post, parse_frontmatter

__all__ = [
    "APIClient",
    "ConfigStore",
    "Settings",
    "build_post",
    "load_post",
    "login",
    "parse_frontmatter",
]
