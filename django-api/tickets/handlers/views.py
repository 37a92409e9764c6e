"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.conf import get_ticket_service
from tickets.domain import DomainError
from tickets.handlers.serializers import PurchaseOrderSerializer, PurchaseRequestSerializer


def _domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


def _invalid_request_response(serializer: PurchaseRequestSerializer) -> Response:
    return Response(
        {"code": "INVALID_REQUEST", "errors": serializer.errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_request_response(serializer)

        service = get_ticket_service()
        try:
            service.purchase_tickets(
                serializer.validated_data.get("account_id"),
                *serializer.ticket_type_requests(),
            )
        except DomainError as error:
            return _domain_error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class PurchaseQuoteView(APIView):
    """Handler for POST /api/purchases/quote"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_request_response(serializer)

        service = get_ticket_service()
        try:
            order = service.price_purchase(
                serializer.validated_data.get("account_id"),
                *serializer.ticket_type_requests(),
            )
        except DomainError as error:
            return _domain_error_response(error)
        return Response(PurchaseOrderSerializer(order).data)
