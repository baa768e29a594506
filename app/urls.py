"""
URL configuration for the localization strings project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path

from .views import HealthcheckView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("healthcheck/", HealthcheckView.as_view(), name="healthcheck"),
    path("translation/", include("translation.urls")),
]
