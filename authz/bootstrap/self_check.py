"""
Authz Bootstrap - Self-Check Orchestrator
=========================================
Runs all static table checks at startup.
If any check fails → AuthzBootstrapError propagates.

Check order:
1. Permission tokens unique and well-formed
2. Permission metadata complete
3. Role ranks strictly ordered
4. Role default sets complete and valid
"""

import logging

from authz.bootstrap.invariants import (
    check_permission_metadata,
    check_permission_tokens,
    check_role_defaults,
    check_role_ranks,
)

logger = logging.getLogger("authz.bootstrap")


def run_self_check():
    logger.info("═══ Authz Self-Check Starting ═══")

    check_permission_tokens()
    check_permission_metadata()
    check_role_ranks()
    check_role_defaults()

    logger.info("═══ Authz Self-Check PASSED ═══")
