'''
Customer model
'''
from uuid import uuid4

from sqlalchemy import Column, String

from dashboard import db

class Customer(db.Model):
    '''
    Represents a customer invoices are issued to
    '''
    __tablename__ = 'customers'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255))

    def __repr__(self):
        return f'<Customer {self.id}: {self.name}>'
