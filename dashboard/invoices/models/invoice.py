'''
Invoice model
'''
import enum
from uuid import uuid4

from sqlalchemy import Column, Date, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from dashboard import db

class InvoiceStatus(enum.Enum):
    ''' Invoice statuses '''
    pending = 1
    paid = 2

class Invoice(db.Model):
    '''
    Invoice model. Amount is kept in cents
    '''
    __tablename__ = 'invoices'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    customer_id = Column(String(36), ForeignKey('customers.id'), nullable=False)
    customer = relationship('Customer', foreign_keys=[customer_id])
    amount = Column(Integer, nullable=False)
    status = Column(Enum(InvoiceStatus), nullable=False)
    date = Column(Date, nullable=False)

    def __repr__(self):
        return f"<Invoice: {self.id}>"

    @property
    def amount_dollars(self):
        return self.amount / 100
