from flask import Response, abort, redirect, render_template, request
from flask_login import login_required

from dashboard import cache, db
from dashboard.customers.models import Customer
from dashboard.invoices import INVOICES_PATH, bp_client_user
from dashboard.invoices.actions import create_invoice, delete_invoice, update_invoice
from dashboard.invoices.models import Invoice, InvoiceStatus
from dashboard.invoices.validators.invoice import InvoiceValidator

def _get_invoices():
    return Invoice.query.order_by(Invoice.date.desc(), Invoice.id).all()

def _render_form(invoice=None, state=None, form_data=None):
    return render_template('invoice_form.html',
        form=InvoiceValidator(formdata=None),
        invoice=invoice,
        customers=Customer.query.order_by(Customer.name).all(),
        statuses=[s.name for s in InvoiceStatus],
        state=state or {'errors': {}, 'message': None},
        form_data=form_data or {})

@bp_client_user.route('')
@login_required
def index():
    return redirect(INVOICES_PATH)

@bp_client_user.route('/invoices')
@login_required
@cache.cached()
def get_invoices():
    '''
    Invoices list. The rendered page is cached till next invoice change
    '''
    return render_template('invoices.html', invoices=_get_invoices())

@bp_client_user.route('/invoices/create', methods=['GET', 'POST'])
@login_required
def create():
    if request.method == 'POST':
        result = create_invoice(request.form)
        if isinstance(result, dict):
            return _render_form(state=result, form_data=request.form)
        return result
    return _render_form()

@bp_client_user.route('/invoices/<invoice_id>/edit', methods=['GET', 'POST'])
@login_required
def edit(invoice_id):
    invoice = db.session.get(Invoice, invoice_id)
    if not invoice:
        abort(Response(f"No invoice {invoice_id} was found", status=404))
    if request.method == 'POST':
        result = update_invoice(invoice_id, request.form)
        if isinstance(result, dict):
            return _render_form(invoice, state=result, form_data=request.form)
        return result
    return _render_form(invoice)

@bp_client_user.route('/invoices/<invoice_id>/delete', methods=['POST'])
@login_required
def delete(invoice_id):
    delete_invoice(invoice_id)
    return render_template('invoices.html', invoices=_get_invoices())
