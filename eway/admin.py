from django.contrib import admin
from eway.models import OrderTransaction


class OrderTransactionAdmin(admin.ModelAdmin):
    list_display = ('order_number', 'method', 'amount', 'trxn_number',
                    'accepted', 'date_created')
    readonly_fields = ('order_number', 'method', 'amount',
                       'managed_customer_id', 'invoice_reference',
                       'trxn_number', 'auth_code', 'accepted', 'reason',
                       'pretty_request_xml', 'pretty_response_xml',
                       'date_created')
    exclude = ('request_xml', 'response_xml')


admin.site.register(OrderTransaction, OrderTransactionAdmin)
