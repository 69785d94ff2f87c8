"""
Saved analyses and uploaded photos.

Records are kept in process memory and keyed by username; files are
addressed by an opaque id and served back through a public URL.
"""
