"""
Default settings for eWAY's Managed Payment Service.

A different mapping of the same shape can be passed to the gateway (or set as
``EWAY_CONFIG`` in Django settings) to point at another endpoint.
"""

# Fields that can be sent when creating or updating a managed customer.  Each
# entry maps the keyword used by callers to the element name eWAY expects.
CUSTOMER_FIELDS = (
    ('title', 'Title'),
    ('first_name', 'FirstName'),
    ('last_name', 'LastName'),
    ('address', 'Address'),
    ('suburb', 'Suburb'),
    ('state', 'State'),
    ('company', 'Company'),
    ('postcode', 'PostCode'),
    ('country', 'Country'),
    ('email', 'Email'),
    ('fax', 'Fax'),
    ('phone', 'Phone'),
    ('mobile', 'Mobile'),
    ('customer_reference', 'CustomerRef'),
    ('job_description', 'JobDesc'),
    ('comments', 'Comments'),
    ('url', 'URL'),
    ('card_number', 'CCNumber'),
    ('name_on_card', 'CCNameOnCard'),
    ('expiry_month', 'CCExpiryMonth'),
    ('expiry_year', 'CCExpiryYear'),
)

DEFAULT_CONFIG = {
    'soap': {
        'endpoint': 'https://www.eway.com.au/gateway/ManagedPaymentService/managedCreditCardPayment.asmx',
        'test_endpoint': 'https://www.eway.com.au/gateway/ManagedPaymentService/test/managedCreditCardPayment.asmx',
        'soap_namespace': 'http://schemas.xmlsoap.org/soap/envelope/',
        'service_namespace': 'https://www.eway.com.au/gateway/managedpayment',
    },
    'fields': {
        'create_customer': CUSTOMER_FIELDS,
        'update_customer': CUSTOMER_FIELDS,
    },
}
