'''
Credentials based sign-in provider on top of Flask-Login.
Raises AuthError subclasses when user can't be signed in
'''
import logging
from typing import Optional

from flask import redirect
from flask_login import login_user, logout_user
from werkzeug.datastructures import MultiDict

from dashboard.exceptions import CredentialsSignin, InvalidProvider
from dashboard.users.forms.login import LoginForm
from dashboard.users.models import User

DEFAULT_REDIRECT = '/dashboard'
LOGIN_PAGE = '/login'

def authorize(credentials) -> Optional[User]:
    '''
    Returns user matching provided email and password or None
    '''
    logger = logging.getLogger('authorize')
    form = LoginForm(formdata=MultiDict(credentials))
    if not form.validate():
        logger.debug("Credentials are malformed: %s", form.errors)
        return None
    user = User.query.filter_by(email=form.email.data).first()
    if user is None:
        logger.warning("No user <%s> was found", form.email.data)
        return None
    if not user.check_password(form.password.data):
        logger.warning("Failed attempt to log in as %s because of wrong password", user)
        return None
    return user

PROVIDERS = {
    'credentials': authorize
}

def _is_local_path(path):
    return bool(path) and path.startswith('/') and not path.startswith('//')

def sign_in(provider: str, form_data, redirect_to: Optional[str]=None):
    '''
    Signs user in using <provider> and redirects to <redirect_to>,
    <redirectTo> form field or to dashboard
    '''
    logger = logging.getLogger('sign_in')
    if provider not in PROVIDERS:
        raise InvalidProvider(f"Unknown provider <{provider}>")
    user = PROVIDERS[provider](form_data)
    if user is None:
        raise CredentialsSignin("Couldn't authorize provided credentials")
    login_user(user)
    logger.info("User %s is logged in", user)

    target = redirect_to or MultiDict(form_data).get('redirectTo')
    return redirect(target if _is_local_path(target) else DEFAULT_REDIRECT)

def sign_out(redirect_to: str=LOGIN_PAGE):
    '''Tears user session down'''
    logout_user()
    return redirect(redirect_to)
