"""Approval statistics for merged pull requests in a GitHub organization.

Runs two issue searches against the GitHub API:
- merged PRs that received an approving review
- merged PRs that did not
and reports per-repository and overall approval rates.
"""

__version__ = "1.0.0"
