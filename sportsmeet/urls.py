"""URL configuration for the sports meet API."""
from django.urls import path
from rest_framework.routers import DefaultRouter

from . import api

app_name = "sportsmeet"

router = DefaultRouter()
router.register(r"events", api.EventViewSet, basename="event")
router.register(r"results", api.ResultViewSet, basename="result")
router.register(r"leaderboard", api.LeaderboardViewSet, basename="leaderboard")
router.register(r"session", api.SessionViewSet, basename="session")

urlpatterns = [
    path("reset/", api.ResetView.as_view(), name="reset"),
    *router.urls,
]
