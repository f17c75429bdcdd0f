class AuthError(Exception):
    '''Base class of errors raised by the sign-in machinery'''
    type = 'AuthError'

    def __init__(self, message=None):
        super().__init__()
        self.message = message
        self.args = (message,)

    def __str__(self):
        return f"{self.type}: {self.message}" if self.message else self.type

class CredentialsSignin(AuthError):
    type = 'CredentialsSignin'

class InvalidProvider(AuthError):
    type = 'InvalidProvider'
