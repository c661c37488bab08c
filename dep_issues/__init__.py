"""dep-issues: open issue trackers of a Maven project's dependencies."""

__version__ = "0.1.0"
