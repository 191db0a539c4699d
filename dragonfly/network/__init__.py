"""
Network and file retrieval.
"""

from .puller import Puller, parse_url

__all__ = ['Puller', 'parse_url']
