"""Rule-based matching of small-business profiles against funding programs."""

__version__ = "0.1.0"
