"""Serializers for ticket purchase requests and quotes.

Only input format is checked here. Purchase rules (negative counts,
missing account, empty order) belong to the service.
"""

from rest_framework import serializers

from tickets.domain import PurchaseOrder, TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for one TicketTypeRequest."""

    type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    no_of_tickets = serializers.IntegerField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for a purchase or quote request body."""

    account_id = serializers.IntegerField(required=False, allow_null=True)
    tickets = TicketTypeRequestSerializer(many=True, required=False)

    def ticket_type_requests(self) -> list[TicketTypeRequest]:
        return [
            TicketTypeRequest(
                ticket_type=TicketType(item["type"]),
                no_of_tickets=item["no_of_tickets"],
            )
            for item in self.validated_data.get("tickets", [])
        ]


class PurchaseOrderSerializer(serializers.Serializer):
    """Serializer for PurchaseOrder domain model."""

    account_id = serializers.IntegerField(source="account_id.value")
    total_amount = serializers.IntegerField(source="total_amount.amount")
    total_seats = serializers.IntegerField(source="total_seats.value")
    tickets = serializers.SerializerMethodField()

    def get_tickets(self, order: PurchaseOrder) -> dict[str, int]:
        return {
            "adult": order.counts.adult,
            "child": order.counts.child,
            "infant": order.counts.infant,
        }
