class CobstructException(Exception):
    '''Base class to extend in order to throw exception in cobstruct.

    It takes an optional chain that represents the names of the layers
    (groups and fields) involved in the failure.
    '''

    def __init__(self, message='', chain=None):
        self.chain = chain or []
        super().__init__(message)


class InvalidOperand(CobstructException, TypeError):
    '''Arithmetic attempted with a non numeric value.'''
    pass


class SubvalueUnsupported(CobstructException, TypeError):
    pass


class SubvalueParseError(CobstructException, ValueError):
    pass


class IndexOutOfRange(CobstructException, IndexError):
    pass


class ConditionEvaluationFailure(CobstructException):
    '''The predicate of a condition field raised.

    Fields don't propagate it: it's only used to report the failure
    in the logs, the previous value of the field is kept.'''
    pass


class MissingAttachedPayload(CobstructException):
    '''Implicit write requested on a file without attached data.'''
    pass
