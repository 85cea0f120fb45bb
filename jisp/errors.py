

class JispError(Exception):
    """ Base class for all jisp errors"""
    pass

class JispInvalidSymbol(JispError):
    """ Raised when something other than a symbol is used as a binding name"""
    pass

class JispUnboundSymbol(JispError):
    """ Raised when a symbol is looked up before it is bound"""
    pass

class JispSyntaxError(JispError):
    """ Raised when the source text is not a well formed expression"""

class JispArityError(JispError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""

class JispTypeError(JispError):
    """ Raised when a value of the wrong type is applied, passed or destructured"""
