"""Directory traversal producing tree lines and statistics.

This package contains the recursive tree walker together with the transient
entry model it builds for every listed child and the optional statistics
accumulator it feeds.
"""
