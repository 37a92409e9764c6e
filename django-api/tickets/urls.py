from django.urls import path

from tickets.handlers import PurchaseQuoteView, PurchaseView

urlpatterns = [
    path("purchases", PurchaseView.as_view(), name="purchase"),
    path("purchases/quote", PurchaseQuoteView.as_view(), name="purchase-quote"),
]
