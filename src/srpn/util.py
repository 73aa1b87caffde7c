from functools import wraps


# Signed 32-bit bounds; every value on the stack lies within them.
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class SRPNError(Exception):
    '''
    User error. First argument is the exact line to report.
    '''
    pass


def wrap_user_errors(message):
    '''
    Decorator that converts unexpected exceptions to SRPNErrors.

    Passes through SRPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except SRPNError:
                raise
            except Exception as e:
                raise SRPNError(message, e)
        return wrapper
    return decorator


def saturate(n):
    '''
    Clamp integer to the signed 32-bit range.
    '''
    return max(INT_MIN, min(INT_MAX, n))
