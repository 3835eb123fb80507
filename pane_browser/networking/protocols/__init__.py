"""URL protocol implementations"""
from .base_url import URL, get_user_agent

__all__ = ['URL', 'get_user_agent']
