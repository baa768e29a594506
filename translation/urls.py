"""URL configuration for translation app."""

from django.urls import path

from . import views

app_name = "translation"

urlpatterns = [
    path("api/v1/translations", views.TranslationCollectionAPIView.as_view(), name="translations"),
    path("api/v1/translations/sids", views.SidListAPIView.as_view(), name="sids"),
    path("api/v1/translations/<str:sid>", views.SourceTextDetailAPIView.as_view(), name="source_text"),
    path("api/v1/translations/<str:sid>/source", views.SourceTextUpdateAPIView.as_view(), name="source_text_update"),
    path("api/v1/translations/<str:sid>/<str:lang_id>", views.TranslationDetailAPIView.as_view(), name="translation"),
]
