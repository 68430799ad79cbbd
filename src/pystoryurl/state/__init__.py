"""State/store layer.

The single owner of URL-visible state: passthrough query parameters and
route state, with the merge and diff policy applied to them.
"""
