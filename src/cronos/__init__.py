"""GitLab merge-duration reporter."""

__version__ = "0.1.0"
