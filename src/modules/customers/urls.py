"""Customer RPC URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.customers.views import GetCustomerView, UpsertCustomerView
from shared.contracts.customers import GET_CUSTOMER_PATH, UPSERT_CUSTOMER_PATH

urlpatterns = [
    path(UPSERT_CUSTOMER_PATH.lstrip("/"), UpsertCustomerView.as_view(), name="rpc_upsert_customer"),
    path(GET_CUSTOMER_PATH.lstrip("/"), GetCustomerView.as_view(), name="rpc_get_customer"),
]
