'''
Invoice mutations triggered by dashboard form submissions.
Each of them writes the change to the database and invalidates cached
invoice list. Creation and update validate submitted form first and
redirect back to the list afterwards.
Validation failures are returned as form state:
    {'errors': {<field>: [<message>, ...]}, 'message': <message>}
Database errors aren't handled here
'''
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
import logging
from typing import Any, Optional

from flask import redirect
from sqlalchemy import delete, insert, update
from werkzeug.datastructures import MultiDict

from dashboard import db
from dashboard.invoices import INVOICES_PATH
from dashboard.invoices.models import Invoice, InvoiceStatus
from dashboard.invoices.validators.invoice import InvoiceValidator
from dashboard.tools import get_field_errors, is_csrf_failed, revalidate_path

EXPIRED_FORM_MESSAGE = 'The form has expired. Please reload the page and try again.'

def _to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))

def _validate(form_data, failure_message) -> tuple[Optional[dict[str, Any]], Optional[dict[str, Any]]]:
    '''
    Returns validated and coerced invoice fields or form state with errors
    '''
    logger = logging.getLogger('validate_invoice')
    with InvoiceValidator(formdata=MultiDict(form_data)) as validator:
        if not validator.validate():
            errors = get_field_errors(validator)
            logger.debug("Invoice input is invalid: %s", errors)
            if is_csrf_failed(validator):
                logger.warning("CSRF token check has failed")
                return None, {'errors': errors, 'message': EXPIRED_FORM_MESSAGE}
            return None, {'errors': errors, 'message': failure_message}
        return {
            'customer_id': validator.customer_id.data,
            'amount': _to_cents(validator.amount.data),
            'status': InvoiceStatus[validator.status.data]
        }, None

def create_invoice(form_data):
    '''Creates an invoice from submitted form'''
    logger = logging.getLogger('create_invoice')
    fields, state = _validate(form_data, 'Missing Fields. Failed to Create Invoice.')
    if state is not None:
        return state

    result = db.session.execute(
        insert(Invoice.__table__).values(**fields, date=date.today()))
    db.session.commit()
    logger.info("Invoice %s is created", result.inserted_primary_key[0])

    revalidate_path(INVOICES_PATH)
    return redirect(INVOICES_PATH)

def update_invoice(invoice_id: str, form_data):
    '''Updates customer, amount and status of an existing invoice'''
    logger = logging.getLogger('update_invoice')
    fields, state = _validate(form_data, 'Missing Fields. Failed to Update Invoice.')
    if state is not None:
        return state

    result = db.session.execute(
        update(Invoice).where(Invoice.id == invoice_id).values(**fields))
    db.session.commit()
    if result.rowcount == 0:
        logger.warning("No invoice %s was found to update", invoice_id)
    else:
        logger.info("Invoice %s is updated", invoice_id)

    revalidate_path(INVOICES_PATH)
    return redirect(INVOICES_PATH)

def delete_invoice(invoice_id: str) -> None:
    '''Deletes an invoice. Doesn't redirect'''
    logger = logging.getLogger('delete_invoice')
    result = db.session.execute(delete(Invoice).where(Invoice.id == invoice_id))
    db.session.commit()
    logger.info("%s invoice(s) with ID %s are deleted", result.rowcount, invoice_id)
    revalidate_path(INVOICES_PATH)
