"""
Remote source providers.

Fetchers clone a remote URL into a local directory:
- GitCloneFetcher: shells out to `git clone`
"""
from axroot.fetchers.base import SourceFetcher
from axroot.fetchers.git import GitCloneFetcher

__all__ = ["SourceFetcher", "GitCloneFetcher"]
