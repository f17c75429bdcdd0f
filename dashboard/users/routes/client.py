'''
Contains client routes of the application
'''
from urllib.parse import urlsplit

from flask import redirect, render_template, request
from flask_login import current_user, login_required

from dashboard.users import bp_client_user
from dashboard.users.actions import authenticate, sign_out_action
from dashboard.users.auth import DEFAULT_REDIRECT
from dashboard.users.forms.login import LoginForm

@bp_client_user.route('/')
@login_required
def index():
    '''
    Entry point to the application.
    Takes no arguments
    '''
    return redirect(DEFAULT_REDIRECT)

@bp_client_user.route('/login', methods=['GET', 'POST'])
def user_login():
    ''' Login user '''
    if current_user.is_authenticated:
        return redirect(DEFAULT_REDIRECT)
    form = LoginForm()
    error_message = None
    if request.method == 'POST':
        result = authenticate(request.form)
        if not isinstance(result, str):
            return result
        error_message = result
    else:
        form.redirect_to.data = urlsplit(request.args.get('next', '')).path or DEFAULT_REDIRECT

    return render_template('login.html', title='Log in', form=form, error_message=error_message)

@bp_client_user.route('/logout', methods=['GET', 'POST'])
@login_required
def user_logout():
    """User log-out logic."""
    return sign_out_action()
