"""
Top‑level package for the AWS Demo API.

The service itself lives in the ``app`` subpackage; ``run`` holds the
process entry point and ``client`` a small ``requests`` based client
for talking to a running instance.
"""

__all__ = []
