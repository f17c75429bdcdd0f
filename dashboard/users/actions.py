'''
Authentication actions triggered by login and logout forms
'''
from dashboard.exceptions import AuthError
from dashboard.users.auth import sign_in, sign_out

def authenticate(form_data):
    '''
    Signs user in with submitted credentials.
    Returns redirect response on success or error message
    for known sign-in errors. Other errors are propagated
    '''
    try:
        return sign_in('credentials', form_data)
    except AuthError as error:
        if error.type == 'CredentialsSignin':
            return 'Invalid credentials.'
        return 'Something went wrong.'

def sign_out_action():
    return sign_out()
