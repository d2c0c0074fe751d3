"""
Authz Django Adapter - App Configuration
========================================
Runs the static table self-check when Django finishes loading.
If the check fails → AuthzBootstrapError prevents startup.
"""

from django.apps import AppConfig


class AuthzApiConfig(AppConfig):
    name = "adapters.django_api"
    label = "authz_api"
    verbose_name = "Authz HTTP API"

    def ready(self):
        from authz.bootstrap.self_check import run_self_check
        run_self_check()
