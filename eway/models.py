import re
from xml.dom.minidom import parseString
from xml.parsers.expat import ExpatError

from django.db import models

from eway.xmlutils import mask_sensitive_data


def prettify_xml(xml_str):
    if not xml_str:
        return xml_str
    compact = re.sub(r'>\s*\n\s*<', '><', xml_str.strip())
    try:
        ugly = parseString(compact).toprettyxml(indent='    ')
    except ExpatError:
        return xml_str
    regex = re.compile(r'>\n\s+([^<>\s].*?)\n\s+</', re.DOTALL)
    return regex.sub(r'>\g<1></', ugly)


class OrderTransaction(models.Model):

    # Note we don't use a foreign key as the order hasn't been created
    # by the time the transaction takes place
    order_number = models.CharField(max_length=128, db_index=True)

    # The eWAY operation - 'ProcessPayment' or 'ProcessPaymentWithCVN'
    method = models.CharField(max_length=32)
    amount = models.DecimalField(
        decimal_places=2, max_digits=12, blank=True, null=True)
    managed_customer_id = models.CharField(
        max_length=128, blank=True, null=True, db_index=True)
    invoice_reference = models.CharField(
        max_length=128, blank=True, null=True)

    # Response fields
    trxn_number = models.CharField(max_length=128, blank=True, null=True)
    auth_code = models.CharField(max_length=128, blank=True, null=True)
    accepted = models.BooleanField(default=False)
    reason = models.CharField(max_length=255, blank=True)

    # Store full XML for debugging purposes
    request_xml = models.TextField()
    response_xml = models.TextField()

    date_created = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-date_created',)

    def save(self, *args, **kwargs):
        # Ensure sensitive data isn't saved
        if not self.pk:
            self.request_xml = mask_sensitive_data(self.request_xml)
        super(OrderTransaction, self).save(*args, **kwargs)

    def __str__(self):
        return u'%s txn for order %s - trxn number: %s, accepted: %s' % (
            self.method,
            self.order_number,
            self.trxn_number,
            self.accepted)

    @property
    def pretty_request_xml(self):
        return prettify_xml(self.request_xml)

    @property
    def pretty_response_xml(self):
        return prettify_xml(self.response_xml)

    @property
    def declined(self):
        # Faults never reach eWAY's bank so have no transaction number
        return not self.accepted and bool(self.trxn_number)

    @property
    def response_code(self):
        """
        The two digit bank response code that starts eWAY's error text, eg
        '05' for '05,Do Not Honour'
        """
        match = re.match(r'^(\d{2}),', self.reason or '')
        return match.group(1) if match else None
