"""Role and attribute based authorization for posts and comments."""

__version__ = "0.1.0"
