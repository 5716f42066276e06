import string


def clean_letters(text):
    """
    uppercase letters only, everything else dropped
    eg. 'a, e!' -> 'AE'
    """
    return ''.join([c for c in (text or '').upper() if c in string.ascii_uppercase])

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
