"""
Timeline Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("timeline", views.timeline_view),
    path("resources", views.resources_list_view),
    path("intents/drop", views.drop_view),
    path("intents/resize", views.resize_view),
    path("intents/select", views.select_view),
]
