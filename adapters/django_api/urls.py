"""
Authz Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("articles", views.article_create_view),
    path("articles/<slug:slug>", views.article_detail_view),
    path("articles/<slug:slug>/publish", views.article_publish_view),
    path("me", views.me_view),
    path("onboarding/checklist", views.onboarding_checklist_view),
    path("analytics/summary", views.analytics_summary_view),
    path("admin/audit", views.audit_log_view),
    path("admin/health", views.system_health_view),
]
