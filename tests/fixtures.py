OK_HEADERS = ("HTTP/1.1 200 OK\r\n"
              "Cache-Control: private, max-age=0\r\n"
              "Content-Type: text/xml; charset=utf-8\r\n"
              "Server: Microsoft-IIS/7.5\r\n"
              "X-AspNet-Version: 2.0.50727\r\n"
              "Date: Mon, 05 Nov 2012 03:21:44 GMT\r\n")

SERVER_ERROR_HEADERS = ("HTTP/1.1 500 Internal Server Error\r\n"
                        "Content-Type: text/xml; charset=utf-8\r\n")

SOAP_ENVELOPE = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <soap:Body>
%s
  </soap:Body>
</soap:Envelope>"""

CREATE_CUSTOMER_RESPONSE = SOAP_ENVELOPE % """
    <CreateCustomerResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <CreateCustomerResult>9876543211000</CreateCustomerResult>
    </CreateCustomerResponse>"""

UPDATE_CUSTOMER_RESPONSE = SOAP_ENVELOPE % """
    <UpdateCustomerResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <UpdateCustomerResult>true</UpdateCustomerResult>
    </UpdateCustomerResponse>"""

UPDATE_CUSTOMER_FAILED_RESPONSE = SOAP_ENVELOPE % """
    <UpdateCustomerResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <UpdateCustomerResult>false</UpdateCustomerResult>
    </UpdateCustomerResponse>"""

UPDATE_CUSTOMER_EMPTY_RESPONSE = SOAP_ENVELOPE % """
    <UpdateCustomerResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <UpdateCustomerResult />
    </UpdateCustomerResponse>"""

QUERY_CUSTOMER_RESPONSE = SOAP_ENVELOPE % """
    <QueryCustomerResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <QueryCustomerResult>
        <CustomerRef>Test 123</CustomerRef>
        <CustomerTitle>Mr.</CustomerTitle>
        <CustomerFirstName>Jo</CustomerFirstName>
        <CustomerLastName>Smith</CustomerLastName>
        <CustomerCompany />
        <CustomerJobDesc />
        <CustomerEmail>test@eway.com.au</CustomerEmail>
        <CustomerAddress>15 Dundas Court</CustomerAddress>
        <CustomerSuburb>Phillip</CustomerSuburb>
        <CustomerState>ACT</CustomerState>
        <CustomerPostCode>2606</CustomerPostCode>
        <CustomerCountry>au</CustomerCountry>
        <CustomerPhone1>02 111 2222</CustomerPhone1>
        <CustomerPhone2 />
        <CustomerFax />
        <CustomerURL />
        <CustomerComments />
        <CCName>Jo Smith</CCName>
        <CCNumber>444433XXXXXX1111</CCNumber>
        <CCExpiryMonth>08</CCExpiryMonth>
        <CCExpiryYear>15</CCExpiryYear>
      </QueryCustomerResult>
    </QueryCustomerResponse>"""

QUERY_CUSTOMER_BY_REFERENCE_RESPONSE = SOAP_ENVELOPE % """
    <QueryCustomerByReferenceResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <QueryCustomerByReferenceResult>
        <ManagedCustomerID>9876543211000</ManagedCustomerID>
        <CustomerRef>Test 123</CustomerRef>
        <CustomerFirstName>Jo</CustomerFirstName>
        <CustomerLastName>Smith</CustomerLastName>
        <CustomerCompany />
      </QueryCustomerByReferenceResult>
    </QueryCustomerByReferenceResponse>"""

PROCESS_PAYMENT_RESPONSE = SOAP_ENVELOPE % """
    <ProcessPaymentResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <ewayResponse>
        <ewayTrxnError>00,Transaction Approved(Test Gateway)</ewayTrxnError>
        <ewayTrxnStatus>True</ewayTrxnStatus>
        <ewayTrxnNumber>1011058</ewayTrxnNumber>
        <ewayReturnAmount>1000</ewayReturnAmount>
        <ewayAuthCode>123456</ewayAuthCode>
      </ewayResponse>
    </ProcessPaymentResponse>"""

PROCESS_PAYMENT_DECLINED_RESPONSE = SOAP_ENVELOPE % """
    <ProcessPaymentResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <ewayResponse>
        <ewayTrxnError>05,Do Not Honour(Test Gateway)</ewayTrxnError>
        <ewayTrxnStatus>False</ewayTrxnStatus>
        <ewayTrxnNumber>1011059</ewayTrxnNumber>
        <ewayReturnAmount>1005</ewayReturnAmount>
        <ewayAuthCode />
      </ewayResponse>
    </ProcessPaymentResponse>"""

PROCESS_PAYMENT_WITH_CVN_RESPONSE = SOAP_ENVELOPE % """
    <ProcessPaymentWithCVNResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <ewayResponse>
        <ewayTrxnError>00,Transaction Approved(Test CVN Gateway)</ewayTrxnError>
        <ewayTrxnStatus>True</ewayTrxnStatus>
        <ewayTrxnNumber>1011060</ewayTrxnNumber>
        <ewayReturnAmount>1000</ewayReturnAmount>
        <ewayAuthCode>654321</ewayAuthCode>
      </ewayResponse>
    </ProcessPaymentWithCVNResponse>"""

QUERY_PAYMENT_RESPONSE = SOAP_ENVELOPE % """
    <QueryPaymentResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <QueryPaymentResult>
        <ManagedTransaction>
          <TotalAmount>1000</TotalAmount>
          <Result>1</Result>
          <ResponseText>Approved</ResponseText>
          <TransactionDate>2012-11-05T14:21:44+11:00</TransactionDate>
          <ewayTrxnNumber>1011058</ewayTrxnNumber>
        </ManagedTransaction>
        <ManagedTransaction>
          <TotalAmount>1005</TotalAmount>
          <Result>0</Result>
          <ResponseText>Do Not Honour</ResponseText>
          <TransactionDate>2012-11-05T14:25:02+11:00</TransactionDate>
          <ewayTrxnNumber>1011059</ewayTrxnNumber>
        </ManagedTransaction>
      </QueryPaymentResult>
    </QueryPaymentResponse>"""

EMPTY_QUERY_PAYMENT_RESPONSE = SOAP_ENVELOPE % """
    <QueryPaymentResponse xmlns="https://www.eway.com.au/gateway/managedpayment">
      <QueryPaymentResult />
    </QueryPaymentResponse>"""

EMPTY_RESPONSE = SOAP_ENVELOPE % ""

FAULT_RESPONSE = SOAP_ENVELOPE % """
    <soap:Fault>
      <faultcode>Client</faultcode>
      <faultstring>Bad auth</faultstring>
      <detail />
    </soap:Fault>"""

HTML_ERROR_RESPONSE = """<html><head><title>Runtime Error</title></head>
<body><h1>Server Error in '/' Application.</h1></body></html>"""

SAMPLE_REQUEST = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/" xmlns:man="https://www.eway.com.au/gateway/managedpayment">
  <soap:Header>
    <man:eWAYHeader>
      <man:eWAYCustomerID>87654321</man:eWAYCustomerID>
      <man:Username>test@eway.com.au</man:Username>
      <man:Password>test123</man:Password>
    </man:eWAYHeader>
  </soap:Header>
  <soap:Body>
    <man:ProcessPaymentWithCVN>
      <man:managedCustomerID>9876543211000</man:managedCustomerID>
      <man:amount>1000</man:amount>
      <man:invoiceReference>100001</man:invoiceReference>
      <man:cvn>123</man:cvn>
    </man:ProcessPaymentWithCVN>
  </soap:Body>
</soap:Envelope>"""

SAMPLE_CREATE_CUSTOMER_REQUEST = """<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/" xmlns:man="https://www.eway.com.au/gateway/managedpayment">
  <soap:Header>
    <man:eWAYHeader>
      <man:eWAYCustomerID>87654321</man:eWAYCustomerID>
      <man:Username>test@eway.com.au</man:Username>
      <man:Password>test123</man:Password>
    </man:eWAYHeader>
  </soap:Header>
  <soap:Body>
    <man:CreateCustomer>
      <man:FirstName>Jo</man:FirstName>
      <man:CCNumber>4444333322221111</man:CCNumber>
    </man:CreateCustomer>
  </soap:Body>
</soap:Envelope>"""
