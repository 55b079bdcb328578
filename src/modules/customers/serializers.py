"""Customer DRF serializers used to document the API.

Responses are rendered from ``CustomerOutputDTO``; these serializers
describe the same shapes for drf-spectacular (OpenAPI / Swagger UI).
"""

from __future__ import annotations

from rest_framework import serializers


class CustomerSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(min_length=3)
    email = serializers.EmailField()
    availableCredit = serializers.FloatField(min_value=0, required=False, default=0)


class CustomerUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=3, required=False)
    email = serializers.EmailField(required=False)
    availableCredit = serializers.FloatField(min_value=0, required=False)


class AddCreditSerializer(serializers.Serializer):
    id = serializers.CharField()
    amount = serializers.FloatField(min_value=0)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
