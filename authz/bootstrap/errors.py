"""
Authz Bootstrap - System Errors
===============================
If a static authorization table violates a system law at startup,
the process must refuse to serve requests.
"""


class AuthzBootstrapError(Exception):
    """
    Raised when a catalog or hierarchy invariant is violated.

    No fallback. No warning-only mode.
    """

    def __init__(self, invariant: str, detail: str):
        self.invariant = invariant
        self.detail = detail
        super().__init__(
            f"AUTHZ BOOTSTRAP FAILURE [{invariant}]: {detail}"
        )
