''' Initialization of the application '''
from json import load
import logging
import os
import types

from flask import Flask
from flask_caching import Cache
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

app: Flask
cache = Cache()
db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()

def create_app(config=None):
    ''' Application factory '''
    global app
    config_file = config or os.environ.get('DASHBOARD_CONFIG_FILE') or 'config-default.json'
    app = Flask(__name__)
    app.config.from_file(config_file, load=load)
    init_logging(app)

    cache.init_app(app)
    db.init_app(app)
    migrate.init_app(app, db, compare_type=True)
    init_login(app)

    register_components(app)

    logging.info("The application is started")
    return app

def register_components(flask_app):
    import_models(flask_app)
    import dashboard.customers
    import dashboard.invoices
    import dashboard.users

    components_modules = [m[1] for m in globals().items()
                          if isinstance(m[1], types.ModuleType)
                             and m[1].__name__.startswith('dashboard.')
                             and m[1].__file__
                             and m[1].__file__.endswith('__init__.py')
                             and hasattr(m[1], 'register_blueprints')
                         ]
    for component_module in components_modules:
        component_module.register_blueprints(flask_app)
    flask_app.logger.info('Blueprints are registered')

def import_models(flask_app):
    import dashboard.customers.models
    import dashboard.invoices.models
    import dashboard.users.models
    with flask_app.app_context():
        db.create_all()

def init_login(flask_app):
    login_manager.init_app(flask_app)
    login_manager.login_view = 'users_client_user.user_login'

    @login_manager.user_loader
    def load_user(user_id):
        from dashboard.users.models import User
        return db.session.get(User, user_id)

def init_logging(flask_app):
    logger = logging.getLogger()
    logger.setLevel(flask_app.config['LOG_LEVEL'])
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s\t%(levelname)s\t%(name)s:%(funcName)s(%(filename)s:%(lineno)d): %(message)s"))
    logger.addHandler(handler)
    logger.info("Starting %s", flask_app.name)
    logger.info("Log level is %s", logging.getLevelName(logger.level))
    flask_app.logger.setLevel(flask_app.config['LOG_LEVEL'])
