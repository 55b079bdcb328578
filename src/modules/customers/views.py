"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are translated by ``error_response`` into their own
status codes; anything unexpected is logged and answered with a 500
prefixed by the operation that failed.
"""

from __future__ import annotations

from typing import List

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import error_response
from modules.customers.dtos import (
    AddCreditDTO,
    CreateCustomerDTO,
    CustomerOutputDTO,
    UpdateCustomerDTO,
    query_number,
)
from modules.customers.entities import Customer
from modules.customers.repositories import get_customer_repository
from modules.customers.serializers import (
    AddCreditSerializer,
    CustomerSerializer,
    CustomerUpdateSerializer,
    ErrorSerializer,
)
from modules.customers.services import CustomerService

ERROR_RESPONSES = {code: ErrorSerializer for code in (400, 404, 409, 452, 500)}


def _serialize(customers: List[Customer]) -> List[dict]:
    return [CustomerOutputDTO.from_entity(c).to_wire() for c in customers]


@extend_schema(tags=["Customers"], responses=ERROR_RESPONSES)
class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with the configured repository backend (DIP).
    All storage access goes through the service/repository layer.
    """

    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=get_customer_repository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses={200: CustomerSerializer(many=True), 500: ErrorSerializer})
    def list(self, request: Request) -> Response:
        """GET /customers"""
        try:
            customers = self._service.list()
        except Exception as exc:
            return error_response(exc, "An error occurred when retrieving customers:")
        return Response(_serialize(customers))

    @extend_schema(responses={200: CustomerSerializer, 404: ErrorSerializer})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /customers/{pk}"""
        try:
            customer = self._service.find_by_id(pk)
        except Exception as exc:
            return error_response(exc, "An error occurred when retrieving customer:")
        return Response(CustomerOutputDTO.from_entity(customer).to_wire())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=CustomerSerializer,
        responses={201: CustomerSerializer, **ERROR_RESPONSES},
    )
    def create(self, request: Request) -> Response:
        """POST /customers"""
        dto = CreateCustomerDTO.from_payload(request.data)

        try:
            customer = self._service.create(
                dto.name, dto.email, dto.available_credit
            )
        except Exception as exc:
            return error_response(exc, "An error occurred when creating customer:")

        out = CustomerOutputDTO.from_entity(customer)
        return Response(out.to_wire(), status=status.HTTP_201_CREATED)

    @extend_schema(
        request=CustomerUpdateSerializer,
        responses={200: CustomerSerializer, **ERROR_RESPONSES},
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /customers/{pk}"""
        dto = UpdateCustomerDTO.from_payload(request.data)

        try:
            customer = self._service.update(
                pk,
                name=dto.name,
                email=dto.email,
                available_credit=dto.available_credit,
            )
        except Exception as exc:
            return error_response(exc, "An error occurred when updating customer:")

        return Response(CustomerOutputDTO.from_entity(customer).to_wire())

    @extend_schema(responses={204: None, 404: ErrorSerializer, 500: ErrorSerializer})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /customers/{pk}"""
        try:
            self._service.delete(pk)
        except Exception as exc:
            return error_response(exc, "An error occurred when deleting customer:")
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Credit
    # ------------------------------------------------------------------

    @extend_schema(
        request=AddCreditSerializer,
        responses={200: CustomerSerializer, **ERROR_RESPONSES},
    )
    @action(detail=False, methods=["post"], url_path="credit")
    def add_credit(self, request: Request) -> Response:
        """POST /customers/credit"""
        dto = AddCreditDTO.from_payload(request.data)

        try:
            customer = self._service.add_credit(dto.id, dto.amount)
        except Exception as exc:
            return error_response(exc, "An error occurred when adding credit:")

        return Response(CustomerOutputDTO.from_entity(customer).to_wire())

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "order",
                OpenApiTypes.STR,
                enum=["asc", "desc"],
                default="desc",
                description="Sort order",
            )
        ],
        responses={200: CustomerSerializer(many=True), 400: ErrorSerializer},
    )
    @action(detail=False, methods=["get"], url_path="sortByCredit")
    def sort_by_credit(self, request: Request) -> Response:
        """GET /customers/sortByCredit?order=asc|desc"""
        order = request.query_params.get("order")

        try:
            customers = self._service.sort_customers_by_credit(order)
        except Exception as exc:
            return error_response(
                exc, "An error occurred while sorting customers by credit:"
            )

        return Response(_serialize(customers))

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "amount",
                OpenApiTypes.NUMBER,
                required=True,
                description="Minimum available credit",
            )
        ],
        responses={
            200: CustomerSerializer(many=True),
            400: ErrorSerializer,
            452: ErrorSerializer,
        },
    )
    @action(detail=False, methods=["get"], url_path="minCredit")
    def min_credit(self, request: Request) -> Response:
        """GET /customers/minCredit?amount=N"""
        amount = query_number(request.query_params.get("amount"))

        try:
            customers = self._service.find_by_minimum_credit(amount)
        except Exception as exc:
            return error_response(
                exc, "An error occurred when filtering customers by credit:"
            )

        return Response(_serialize(customers))
