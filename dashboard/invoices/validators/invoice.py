'''Validator for invoice creation and update input'''
from decimal import Decimal

from flask_wtf import FlaskForm
from wtforms import DecimalField, RadioField, StringField, ValidationError
from wtforms.validators import AnyOf, DataRequired

from dashboard.invoices.models import InvoiceStatus

class AmountField(DecimalField):
    '''Decimal field which leaves unparseable input without value'''
    def process_formdata(self, valuelist):
        try:
            super().process_formdata(valuelist)
        except ValueError:
            self.data = None

# Amounts are stored as 32-bit integer cents rounded half-up
MIN_AMOUNT = Decimal('0.005')
MAX_AMOUNT = Decimal('21474836.47')

def _is_positive_number(_form, field):
    if field.data is None or not field.data.is_finite() or field.data < MIN_AMOUNT:
        raise ValidationError('Please enter an amount greater than $0.')
    if field.data > MAX_AMOUNT:
        raise ValidationError(f'Please enter an amount not greater than ${MAX_AMOUNT:,}.')

class InvoiceValidator(FlaskForm):
    '''Validator for invoice creation and update input'''
    customer_id = StringField('Customer', name='customerId',
        validators=[DataRequired(message='Please select a customer.')])
    amount = AmountField('Amount', name='amount', places=2,
        validators=[_is_positive_number])
    status = RadioField('Status', name='status',
        choices=[(s.name, s.name.capitalize()) for s in InvoiceStatus],
        validate_choice=False,
        validators=[AnyOf([s.name for s in InvoiceStatus],
                          message='Please select an invoice status.')])

    def __enter__(self):
        return self

    def __exit__(self, *_args):
        del self
