"""
Version 1 of the Conference API.

Routes are mounted under ``settings.api_prefix`` (``/api`` by
default) rather than a versioned prefix, so existing clients calling
``/api/events`` keep working.
"""
