from .invoice import Invoice, InvoiceStatus
