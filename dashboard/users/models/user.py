'''
User model
'''
from uuid import uuid4

from flask_login import UserMixin
from sqlalchemy import Column, String
from werkzeug.security import check_password_hash, generate_password_hash

from dashboard import db

class User(db.Model, UserMixin):
    '''
    Represents dashboard's user
    '''
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    @property
    def password(self):
        raise AttributeError('Password is write-only')

    @password.setter
    def password(self, value):
        self.set_password(value)

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'
