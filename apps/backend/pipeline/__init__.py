"""
Job posting extraction pipeline.

Renders a job posting URL, dispatches the page to a site plugin and repairs
the result into a JobPostingRecord, degrading to URL heuristics when the
page cannot be used.
"""

__version__ = "0.1.0"
