"""REST API views for the sports meet leaderboard and results entry."""

from __future__ import annotations

import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.views import exception_handler as drf_exception_handler

from . import auth, services
from .apps import get_store
from .exceptions import SportsMeetError
from .permissions import IsMeetAdmin, IsMeetAdminOrReadOnly
from .serializers import (
    EventCreateSerializer,
    EventSerializer,
    FeedEntrySerializer,
    GroupScoreSerializer,
    LoginSerializer,
    ResultCreateSerializer,
    ResultSerializer,
)
from .storage import SessionKeyValueStore

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """Render domain errors as ``{"detail", "code"}``; defer the rest to DRF."""

    if isinstance(exc, SportsMeetError):
        return Response(exc.to_response(), status=exc.status_code)
    return drf_exception_handler(exc, context)


class EventViewSet(viewsets.ViewSet):
    permission_classes = [IsMeetAdminOrReadOnly]

    def list(self, request):
        events = services.get_events(get_store())
        return Response(EventSerializer(events, many=True).data)

    def create(self, request):
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        event = services.add_event(get_store(), data["name"], data["type"])
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        services.delete_event(get_store(), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ResultViewSet(viewsets.ViewSet):
    permission_classes = [IsMeetAdminOrReadOnly]

    def list(self, request):
        feed = services.results_feed(
            get_store(),
            team_color=request.query_params.get("group") or None,
            category=request.query_params.get("type") or None,
        )
        return Response(FeedEntrySerializer(feed, many=True).data)

    def create(self, request):
        serializer = ResultCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = services.add_result(
            get_store(),
            event_id=data["eventId"],
            student_name=data["studentName"],
            register_number=data["studentRegisterNumber"],
            team_color=data["group"],
            placement=data["position"],
        )
        return Response(ResultSerializer(result).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):
        services.delete_result(get_store(), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class LeaderboardViewSet(viewsets.ViewSet):
    def list(self, request):
        scores = services.calculate_leaderboard(get_store())
        return Response(GroupScoreSerializer(scores, many=True).data)


class SessionViewSet(viewsets.ViewSet):
    def list(self, request):
        kv = SessionKeyValueStore(request.session)
        return Response({"isAdmin": auth.is_authenticated(kv)})

    @action(detail=False, methods=["post"])
    def login(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        kv = SessionKeyValueStore(request.session)
        if not auth.login(kv, serializer.validated_data["password"]):
            return Response(
                {"detail": "Invalid password.", "code": "invalid_password"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response({"isAdmin": True})

    @action(detail=False, methods=["post"])
    def logout(self, request):
        auth.logout(SessionKeyValueStore(request.session))
        return Response({"isAdmin": False})


class ResetView(APIView):
    permission_classes = [IsMeetAdmin]

    def post(self, request):
        services.reset_database(get_store())
        logger.warning("Meet data reset through the API")
        return Response(status=status.HTTP_204_NO_CONTENT)
