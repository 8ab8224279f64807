"""Catalog of NVP operation verbs and the client methods bound to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

OPERATIONS: Mapping[str, str] = {
    "set_express_checkout": "SetExpressCheckout",
    "get_express_checkout_details": "GetExpressCheckoutDetails",
    "do_express_checkout_payment": "DoExpressCheckoutPayment",
    "do_direct_payment": "DoDirectPayment",
    "do_capture": "DoCapture",
    "do_authorization": "DoAuthorization",
    "do_reauthorization": "DoReauthorization",
    "do_void": "DoVoid",
    "refund_transaction": "RefundTransaction",
    "get_transaction_details": "GetTransactionDetails",
    "transaction_search": "TransactionSearch",
    "get_balance": "GetBalance",
    "mass_pay": "MassPay",
    "address_verify": "AddressVerify",
    "do_reference_transaction": "DoReferenceTransaction",
    "create_recurring_payments_profile": "CreateRecurringPaymentsProfile",
    "get_recurring_payments_profile_details": "GetRecurringPaymentsProfileDetails",
    "manage_recurring_payments_profile_status": "ManageRecurringPaymentsProfileStatus",
    "update_recurring_payments_profile": "UpdateRecurringPaymentsProfile",
    "bill_outstanding_amount": "BillOutstandingAmount",
    "manage_pending_transaction_status": "ManagePendingTransactionStatus",
    "get_pal_details": "GetPalDetails",
    "bm_create_button": "BMCreateButton",
    "bm_get_button_details": "BMGetButtonDetails",
    "bm_update_button": "BMUpdateButton",
    "bm_manage_button_status": "BMManageButtonStatus",
    "bm_button_search": "BMButtonSearch",
    "bm_get_inventory": "BMGetInventory",
    "bm_set_inventory": "BMSetInventory",
    "callback": "Callback",
}


class NvpOperationsMixin(ABC):
    """Named operation methods delegating to ``call``.

    On the async client each method returns the awaitable from ``call``.
    """

    @abstractmethod
    def call(self, method: str, params: Mapping[str, object] | None = None) -> Any: ...

    def set_express_checkout(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``SetExpressCheckout`` operation with ``params``."""
        return self.call(OPERATIONS["set_express_checkout"], params)

    def get_express_checkout_details(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``GetExpressCheckoutDetails`` operation with ``params``."""
        return self.call(OPERATIONS["get_express_checkout_details"], params)

    def do_express_checkout_payment(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``DoExpressCheckoutPayment`` operation with ``params``."""
        return self.call(OPERATIONS["do_express_checkout_payment"], params)

    def do_direct_payment(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``DoDirectPayment`` operation with ``params``."""
        return self.call(OPERATIONS["do_direct_payment"], params)

    def do_capture(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``DoCapture`` operation with ``params``."""
        return self.call(OPERATIONS["do_capture"], params)

    def do_authorization(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``DoAuthorization`` operation with ``params``."""
        return self.call(OPERATIONS["do_authorization"], params)

    def do_reauthorization(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``DoReauthorization`` operation with ``params``."""
        return self.call(OPERATIONS["do_reauthorization"], params)

    def do_void(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``DoVoid`` operation with ``params``."""
        return self.call(OPERATIONS["do_void"], params)

    def refund_transaction(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``RefundTransaction`` operation with ``params``."""
        return self.call(OPERATIONS["refund_transaction"], params)

    def get_transaction_details(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``GetTransactionDetails`` operation with ``params``."""
        return self.call(OPERATIONS["get_transaction_details"], params)

    def transaction_search(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``TransactionSearch`` operation with ``params``."""
        return self.call(OPERATIONS["transaction_search"], params)

    def get_balance(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``GetBalance`` operation with ``params``."""
        return self.call(OPERATIONS["get_balance"], params)

    def mass_pay(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``MassPay`` operation with ``params``."""
        return self.call(OPERATIONS["mass_pay"], params)

    def address_verify(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``AddressVerify`` operation with ``params``."""
        return self.call(OPERATIONS["address_verify"], params)

    def do_reference_transaction(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``DoReferenceTransaction`` operation with ``params``."""
        return self.call(OPERATIONS["do_reference_transaction"], params)

    def create_recurring_payments_profile(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``CreateRecurringPaymentsProfile`` operation with ``params``."""
        return self.call(OPERATIONS["create_recurring_payments_profile"], params)

    def get_recurring_payments_profile_details(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``GetRecurringPaymentsProfileDetails`` operation with ``params``."""
        return self.call(OPERATIONS["get_recurring_payments_profile_details"], params)

    def manage_recurring_payments_profile_status(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``ManageRecurringPaymentsProfileStatus`` operation with ``params``."""
        return self.call(OPERATIONS["manage_recurring_payments_profile_status"], params)

    def update_recurring_payments_profile(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``UpdateRecurringPaymentsProfile`` operation with ``params``."""
        return self.call(OPERATIONS["update_recurring_payments_profile"], params)

    def bill_outstanding_amount(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BillOutstandingAmount`` operation with ``params``."""
        return self.call(OPERATIONS["bill_outstanding_amount"], params)

    def manage_pending_transaction_status(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``ManagePendingTransactionStatus`` operation with ``params``."""
        return self.call(OPERATIONS["manage_pending_transaction_status"], params)

    def get_pal_details(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``GetPalDetails`` operation with ``params``."""
        return self.call(OPERATIONS["get_pal_details"], params)

    def bm_create_button(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BMCreateButton`` operation with ``params``."""
        return self.call(OPERATIONS["bm_create_button"], params)

    def bm_get_button_details(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BMGetButtonDetails`` operation with ``params``."""
        return self.call(OPERATIONS["bm_get_button_details"], params)

    def bm_update_button(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BMUpdateButton`` operation with ``params``."""
        return self.call(OPERATIONS["bm_update_button"], params)

    def bm_manage_button_status(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BMManageButtonStatus`` operation with ``params``."""
        return self.call(OPERATIONS["bm_manage_button_status"], params)

    def bm_button_search(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BMButtonSearch`` operation with ``params``."""
        return self.call(OPERATIONS["bm_button_search"], params)

    def bm_get_inventory(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BMGetInventory`` operation with ``params``."""
        return self.call(OPERATIONS["bm_get_inventory"], params)

    def bm_set_inventory(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``BMSetInventory`` operation with ``params``."""
        return self.call(OPERATIONS["bm_set_inventory"], params)

    def callback(self, params: Mapping[str, object] | None = None) -> Any:
        """Call the ``Callback`` operation with ``params``."""
        return self.call(OPERATIONS["callback"], params)


__all__ = [
    "OPERATIONS",
    "NvpOperationsMixin",
]
