"""
auditmark: review-state bookkeeping for code audits.

Tracks which line ranges of which files each reviewer has audited,
reconciles review state coming from several reviewers or workspace roots,
and attributes files to the workspace roots of a multi-root session.
"""

__version__ = "0.1.0"
