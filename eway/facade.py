import logging
from decimal import Decimal as D, ROUND_HALF_UP

from django.conf import settings
from oscar.apps.payment.exceptions import UnableToTakePayment, InvalidGatewayRequestError

from eway import config, gateway
from eway.models import OrderTransaction

# Value of ewayTrxnStatus for an approved payment
APPROVED = 'True'


class Facade(object):
    """
    A bridge between oscar's objects and the core gateway object
    """

    def __init__(self):
        log_requests = getattr(settings, 'EWAY_LOG_REQUESTS', False)
        self.gateway = gateway.Gateway(
            settings.EWAY_CUSTOMER_ID,
            settings.EWAY_USERNAME,
            settings.EWAY_PASSWORD,
            getattr(settings, 'EWAY_TEST_MODE', False),
            getattr(settings, 'EWAY_CONFIG', config.DEFAULT_CONFIG),
            logging.getLogger(gateway.__name__) if log_requests else None)
        self.use_cvn = getattr(settings, 'EWAY_USE_CVN', False)

    def amount_in_cents(self, amount):
        """
        eWAY takes amounts as a whole number of cents
        """
        return int((D(amount) * 100).quantize(D('1'), rounding=ROUND_HALF_UP))

    def handle_response(self, method, order_number, amount,
                        managed_customer_id, response):

        # Maintain audit trail
        self.record_txn(method, order_number, amount, managed_customer_id,
                        response)

        # A response is either approved, declined or missing altogether
        if not response:
            raise InvalidGatewayRequestError(
                'An error occurred when communicating with the payment gateway.')
        if response.get('ewayTrxnStatus') == APPROVED:
            return response['ewayTrxnNumber']
        msg = self.get_friendly_decline_message(response)
        raise UnableToTakePayment(msg)

    def record_txn(self, method, order_number, amount, managed_customer_id,
                   response, reason=None):
        last_request = self.gateway.last_request or {}
        last_response = self.gateway.last_response or {}
        response = response or {}
        OrderTransaction.objects.create(
            order_number=order_number,
            method=method,
            amount=amount,
            managed_customer_id=managed_customer_id,
            invoice_reference=order_number,
            trxn_number=response.get('ewayTrxnNumber'),
            auth_code=response.get('ewayAuthCode'),
            accepted=response.get('ewayTrxnStatus') == APPROVED,
            reason=(reason or response.get('ewayTrxnError') or '')[:255],
            request_xml=last_request.get('body', ''),
            response_xml=last_response.get('body', ''))

    def get_friendly_decline_message(self, response):
        return ('The transaction was declined by your bank - please check '
                'your bankcard details and try again')

    # ==================
    # API - customers
    # ==================

    def register_customer(self, **fields):
        """
        Store a customer (and their card) with eWAY, returning the managed
        customer ID to use for later payments
        """
        managed_customer_id = self.gateway.create_customer(**fields)
        if not managed_customer_id:
            raise InvalidGatewayRequestError(
                "eWAY didn't return a managed customer ID")
        return managed_customer_id

    def update_customer(self, managed_customer_id, **fields):
        if not self.gateway.update_customer(managed_customer_id, **fields):
            raise InvalidGatewayRequestError(
                "Unable to update managed customer %s" % managed_customer_id)
        return True

    def get_customer(self, managed_customer_id):
        return self.gateway.query_customer(managed_customer_id) or None

    def get_customer_by_reference(self, customer_reference):
        return self.gateway.query_customer_by_reference(
            customer_reference) or None

    def get_payments(self, managed_customer_id):
        return self.gateway.query_payment(managed_customer_id) or []

    # ==================
    # API - payments
    # ==================

    def authorise(self, order_number, amount, managed_customer_id, cvn=None,
                  invoice_description=None):
        """
        Debit a managed customer's card for the given amount, returning the
        eWAY transaction number.

        The CVN request is used whenever a non-blank CVN is passed, or if
        EWAY_USE_CVN is set.
        """
        cents = self.amount_in_cents(amount)
        if cents <= 0:
            raise UnableToTakePayment("Order amount must be positive")
        kwargs = {'invoice_reference': order_number,
                  'invoice_description': invoice_description}
        if cvn or self.use_cvn:
            method = gateway.PROCESS_PAYMENT_WITH_CVN
            process = self.gateway.process_payment_with_cvn
            kwargs['cvn'] = cvn
        else:
            method = gateway.PROCESS_PAYMENT
            process = self.gateway.process_payment
        try:
            response = process(managed_customer_id, cents, **kwargs)
        except gateway.EwayError as e:
            self.record_txn(method, order_number, amount, managed_customer_id,
                            None, reason=str(e))
            raise
        return self.handle_response(method, order_number, amount,
                                    managed_customer_id, response)
