import logging
import re
import socket
from http import client as httplib
from urllib.parse import urlsplit
from xml.dom.minidom import Document, parseString
from xml.parsers.expat import ExpatError

from oscar.apps.payment.exceptions import GatewayError

from eway import config as eway_config
from eway.xmlutils import (
    create_element, find_first, get_text, mask_sensitive_data, node_to_dict,
    node_collection_to_list)

logger = logging.getLogger(__name__)

# Operations
CREATE_CUSTOMER = 'CreateCustomer'
UPDATE_CUSTOMER = 'UpdateCustomer'
QUERY_CUSTOMER = 'QueryCustomer'
QUERY_CUSTOMER_BY_REFERENCE = 'QueryCustomerByReference'
PROCESS_PAYMENT = 'ProcessPayment'
PROCESS_PAYMENT_WITH_CVN = 'ProcessPaymentWithCVN'
QUERY_PAYMENT = 'QueryPayment'

# HTTP status codes that don't indicate a failure
OK_STATUS_CODES = ('200', '100')

STATUS_LINE_REGEX = re.compile(r'HTTP/[\d.]+ (\d{3}) ?([^\r\n]*)')


class EwayError(GatewayError):
    """
    Raised when eWAY responds with a SOAP fault or a non-OK HTTP status
    """


class Gateway(object):
    """
    Client for eWAY's Managed Payment Service (token payments).

    Each API method sends a single SOAP request.  The last request and
    response are kept on the instance for logging and auditing, so an
    instance shouldn't be shared between threads.
    """

    def __init__(self, customer_id, username, password, test_mode=False,
                 config=None, logger=None):
        self._customer_id = customer_id
        self._username = username
        self._password = password
        self.config = config or eway_config.DEFAULT_CONFIG
        soap = self.config['soap']
        self._soap_ns = soap['soap_namespace']
        self._service_ns = soap['service_namespace']
        self.endpoint = soap['test_endpoint'] if test_mode else soap['endpoint']
        self.logger = logger
        self.headers = {'Content-Type': 'text/xml'}
        self.last_request = None
        self.last_response = None

    # =======
    # Helpers
    # =======

    def _build_envelope(self, operation_name, fields=()):
        """
        Builds the SOAP envelope for an operation.  Fields is a sequence of
        (element name, value) pairs; pairs with no value are left out.
        """
        doc = Document()
        envelope = create_element(doc, doc, 'soap:Envelope',
                                  namespace=self._soap_ns)
        envelope.setAttribute('xmlns:soap', self._soap_ns)
        envelope.setAttribute('xmlns:man', self._service_ns)

        # Authentication
        header = self._soap_element(doc, envelope, 'Header')
        eway_header = self._man_element(doc, header, 'eWAYHeader')
        self._man_element(doc, eway_header, 'eWAYCustomerID', self._customer_id)
        self._man_element(doc, eway_header, 'Username', self._username)
        self._man_element(doc, eway_header, 'Password', self._password)

        # Operation
        body = self._soap_element(doc, envelope, 'Body')
        operation = self._man_element(doc, body, operation_name)
        for name, value in fields:
            if value is None or value == '':
                continue
            self._man_element(doc, operation, name, value)
        return doc.toxml(encoding='utf-8').decode('utf-8')

    def _soap_element(self, doc, parent, tag, value=None):
        return create_element(doc, parent, 'soap:%s' % tag, value,
                              namespace=self._soap_ns)

    def _man_element(self, doc, parent, tag, value=None):
        return create_element(doc, parent, 'man:%s' % tag, value,
                              namespace=self._service_ns)

    def _customer_fields(self, operation, customer_fields):
        """
        Return (element name, value) pairs for the permitted customer fields
        of an operation, in the configured order
        """
        permitted = self.config['fields'][operation]
        names = [name for name, _ in permitted]
        for key in customer_fields:
            if key not in names:
                raise ValueError('"%s" is not a valid field for %s' % (
                    key, operation))
        return [(element, customer_fields.get(name))
                for name, element in permitted]

    def _check_kwargs(self, kwargs, required_keys):
        for key in required_keys:
            if kwargs.get(key) in (None, ''):
                raise ValueError('You must provide a "%s" argument' % key)
        for key, value in kwargs.items():
            if value in (None, ''):
                continue
            if key == 'amount' and not (re.match(r'^\d+$', str(value)) and
                                        int(value) > 0):
                raise ValueError(
                    "Amount must be a positive whole number of cents "
                    "(passed value: %s)" % value)
            if key == 'cvn' and not re.match(r'^\d{3,4}$', str(value)):
                raise ValueError(
                    "CVN must be three or four digits (passed value: %s)" % value)

    def _find(self, doc, *path):
        return find_first(doc, self._service_ns, *path)

    # =========
    # Transport
    # =========

    def _fetch_response(self, request_xml):
        """
        POST the request XML to the endpoint and return the raw header string
        (status line included) and body
        """
        url = urlsplit(self.endpoint)
        if url.scheme == 'https':
            conn = httplib.HTTPSConnection(url.hostname, url.port or 443,
                                           timeout=30)
        else:
            conn = httplib.HTTPConnection(url.hostname, url.port or 80,
                                          timeout=30)
        try:
            conn.request("POST", url.path or '/', request_xml.encode('utf-8'),
                         self.headers)
            response = conn.getresponse()
            body = response.read()
        except (httplib.HTTPException, socket.error) as e:
            raise EwayError("Unable to communicate with eWAY (%s)" % e)
        finally:
            conn.close()
        version = 'HTTP/1.0' if response.version == 10 else 'HTTP/1.1'
        header_string = "%s %s %s\r\n" % (version, response.status,
                                          response.reason)
        header_string += ''.join(
            "%s: %s\r\n" % (k, v) for k, v in response.getheaders())
        return header_string, body.decode('utf-8', 'replace')

    def post(self, envelope, operation_name):
        """
        Send an envelope and return the parsed response document.

        Raises EwayError if the response contains a SOAP fault or has a
        non-OK HTTP status.
        """
        self.headers['SOAPAction'] = '%s/%s' % (self._service_ns,
                                                operation_name)
        self._record_request(envelope)
        self._log_request()
        header_string, body = self._fetch_response(envelope)
        self._record_response(header_string, body)
        self._log_response()
        self._check_for_faults()
        self._check_for_errors()
        return self.last_response['document']

    def _record_request(self, body):
        self.last_request = {
            'headers': dict(self.headers),
            'body': body,
        }
        self.last_response = None

    def _record_response(self, header_string, body):
        try:
            document = parseString(body)
        except ExpatError:
            document = None
        self.last_response = {
            'header_string': header_string,
            'body': body,
            'document': document,
        }

    def _log_request(self):
        if self.logger:
            headers = "\n".join(
                "%s: %s" % (k, v) for k, v in self.last_request['headers'].items())
            self.logger.info("eWAY request sent\n%s\n%s", headers,
                             mask_sensitive_data(self.last_request['body']))

    def _log_response(self):
        if self.logger:
            document = self.last_response['document']
            if document is not None:
                body = document.toprettyxml(indent='  ')
            else:
                body = self.last_response['body']
            self.logger.info("eWAY response received\n%s\n%s",
                             self.last_response['header_string'], body)

    def _check_for_faults(self):
        document = self.last_response['document']
        if document is None:
            return
        faults = document.getElementsByTagNameNS(self._soap_ns, 'Fault')
        if faults:
            fault = faults[0]
            code = self._fault_text(fault, 'faultcode')
            message = self._fault_text(fault, 'faultstring')
            raise EwayError('eWAY server responded with "%s" (%s)' % (
                message, code))

    def _fault_text(self, fault, tag):
        elements = fault.getElementsByTagName(tag)
        return get_text(elements[0]).strip() if elements else ''

    def _check_for_errors(self):
        # Interim responses (eg 100 Continue) come before the final status
        matches = STATUS_LINE_REGEX.findall(
            self.last_response['header_string'])
        if not matches:
            raise EwayError("Unable to find HTTP status in eWAY response")
        status_code, reason = matches[-1][0], matches[-1][1].strip()
        if status_code not in OK_STATUS_CODES:
            raise EwayError('eWAY server responded with "%s" (%s)' % (
                reason, status_code))
        if self.last_response['document'] is None:
            raise EwayError("Unable to parse eWAY response: %s" %
                            self.last_response['body'][:200])

    # ===
    # API
    # ===

    def create_customer(self, **customer_fields):
        """
        Create a managed customer and return its ID (or False if eWAY
        doesn't return one).

        Keyword arguments are the logical names from the 'create_customer'
        field list, eg first_name='John', card_number='4444333322221111'.
        """
        fields = self._customer_fields('create_customer', customer_fields)
        envelope = self._build_envelope(CREATE_CUSTOMER, fields)
        doc = self.post(envelope, CREATE_CUSTOMER)
        result = self._find(doc, 'CreateCustomerResult')
        return get_text(result) if result is not None else False

    def update_customer(self, managed_customer_id, **customer_fields):
        """
        Update a managed customer.  Returns True only if eWAY reports the
        update as successful.
        """
        self._check_kwargs({'managed_customer_id': managed_customer_id},
                           ['managed_customer_id'])
        fields = [('managedCustomerID', managed_customer_id)]
        fields += self._customer_fields('update_customer', customer_fields)
        envelope = self._build_envelope(UPDATE_CUSTOMER, fields)
        doc = self.post(envelope, UPDATE_CUSTOMER)
        result = self._find(doc, 'UpdateCustomerResult')
        return get_text(result) == 'true' if result is not None else False

    def query_customer(self, managed_customer_id):
        self._check_kwargs({'managed_customer_id': managed_customer_id},
                           ['managed_customer_id'])
        envelope = self._build_envelope(
            QUERY_CUSTOMER, [('managedCustomerID', managed_customer_id)])
        doc = self.post(envelope, QUERY_CUSTOMER)
        result = self._find(doc, 'QueryCustomerResult')
        return node_to_dict(result) if result is not None else False

    def query_customer_by_reference(self, customer_reference):
        self._check_kwargs({'customer_reference': customer_reference},
                           ['customer_reference'])
        envelope = self._build_envelope(
            QUERY_CUSTOMER_BY_REFERENCE,
            [('CustomerReference', customer_reference)])
        doc = self.post(envelope, QUERY_CUSTOMER_BY_REFERENCE)
        result = self._find(doc, 'QueryCustomerByReferenceResult')
        return node_to_dict(result) if result is not None else False

    def process_payment(self, managed_customer_id, amount,
                        invoice_reference=None, invoice_description=None):
        """
        Debit a managed customer's card.  Amount is in cents.

        Returns the fields of eWAY's response (ewayTrxnStatus,
        ewayTrxnNumber, ewayTrxnError, ...) or False.
        """
        self._check_kwargs({'managed_customer_id': managed_customer_id,
                            'amount': amount},
                           ['managed_customer_id', 'amount'])
        envelope = self._build_envelope(PROCESS_PAYMENT, [
            ('managedCustomerID', managed_customer_id),
            ('amount', amount),
            ('invoiceReference', invoice_reference),
            ('invoiceDescription', invoice_description)])
        doc = self.post(envelope, PROCESS_PAYMENT)
        result = self._find(doc, 'ProcessPaymentResponse', 'ewayResponse')
        return node_to_dict(result) if result is not None else False

    def process_payment_with_cvn(self, managed_customer_id, amount, cvn=None,
                                 invoice_reference=None,
                                 invoice_description=None):
        """
        As process_payment, but also sends the card verification number
        """
        self._check_kwargs({'managed_customer_id': managed_customer_id,
                            'amount': amount, 'cvn': cvn},
                           ['managed_customer_id', 'amount'])
        envelope = self._build_envelope(PROCESS_PAYMENT_WITH_CVN, [
            ('managedCustomerID', managed_customer_id),
            ('amount', amount),
            ('invoiceReference', invoice_reference),
            ('invoiceDescription', invoice_description),
            ('cvn', cvn)])
        doc = self.post(envelope, PROCESS_PAYMENT_WITH_CVN)
        result = self._find(doc, 'ProcessPaymentWithCVNResponse',
                            'ewayResponse')
        return node_to_dict(result) if result is not None else False

    def query_payment(self, managed_customer_id):
        """
        Return a list of the payments made by a managed customer
        """
        self._check_kwargs({'managed_customer_id': managed_customer_id},
                           ['managed_customer_id'])
        envelope = self._build_envelope(
            QUERY_PAYMENT, [('managedCustomerID', managed_customer_id)])
        doc = self.post(envelope, QUERY_PAYMENT)
        result = self._find(doc, 'QueryPaymentResult')
        return node_collection_to_list(result) if result is not None else False
