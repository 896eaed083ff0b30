"""Serializers for the sports meet REST endpoints."""

from __future__ import annotations

from rest_framework import serializers

from .models import Category, Placement, TeamColor


class EventSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    type = serializers.CharField(source="category", read_only=True)
    isCompleted = serializers.BooleanField(source="is_completed", read_only=True)


class EventCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120)
    type = serializers.ChoiceField(choices=Category.choices)


class ResultSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    eventId = serializers.CharField(source="event_id", read_only=True)
    studentName = serializers.CharField(source="student_name", read_only=True)
    studentRegisterNumber = serializers.CharField(source="register_number", read_only=True)
    group = serializers.CharField(source="team_color", read_only=True)
    position = serializers.IntegerField(source="placement", read_only=True)
    points = serializers.IntegerField(read_only=True)


class ResultCreateSerializer(serializers.Serializer):
    eventId = serializers.CharField()
    studentName = serializers.CharField(max_length=120)
    studentRegisterNumber = serializers.CharField(max_length=64)
    group = serializers.ChoiceField(choices=TeamColor.choices)
    position = serializers.ChoiceField(choices=Placement.choices)


class FeedEntrySerializer(serializers.Serializer):
    def to_representation(self, instance):
        payload = ResultSerializer(instance.result).data
        payload["eventName"] = instance.event_name
        payload["eventType"] = instance.event_category
        return payload


class GroupScoreSerializer(serializers.Serializer):
    group = serializers.CharField(source="team_color", read_only=True)
    totalPoints = serializers.IntegerField(source="total_points", read_only=True)
    golds = serializers.IntegerField(read_only=True)
    silvers = serializers.IntegerField(read_only=True)
    bronzes = serializers.IntegerField(read_only=True)


class LoginSerializer(serializers.Serializer):
    password = serializers.CharField(trim_whitespace=False)
