from flask import Blueprint

bp_client_user = Blueprint('users_client_user', __name__,
                           template_folder='templates')

def register_blueprints(flask_app):
    flask_app.register_blueprint(bp_client_user)

from .models import *
from .routes import client
