from flask import Blueprint

bp_client_user = Blueprint('invoices_client_user', __name__, url_prefix='/dashboard',
                           template_folder='templates')

INVOICES_PATH = '/dashboard/invoices'

def register_blueprints(flask_app):
    flask_app.register_blueprint(bp_client_user)

from .models import *
from .routes import client
