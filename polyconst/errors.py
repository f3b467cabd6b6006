class PolyconstError(Exception):
    pass


# Decoding a single record

class DecodeError(PolyconstError, ValueError):
    pass


class InvalidBase(DecodeError):
    def __init__(self, base, max_base):
        self.base = base
        self.max_base = max_base
        super().__init__('base %r outside supported range 2..%d' % (base, max_base))


class InvalidDigitForBase(DecodeError):
    def __init__(self, digits, char, base):
        self.digits = digits
        self.char = char
        self.base = base
        super().__init__('digit %r in %r is not valid in base %d' % (char, digits, base))


class EmptyValue(DecodeError):
    def __init__(self):
        super().__init__('empty digit string')


class MalformedRecord(DecodeError):
    def __init__(self, record):
        self.record = record
        super().__init__('record %r needs an x, a base and a digit string' % (record,))


class InvalidIndex(DecodeError):
    def __init__(self, x):
        self.x = x
        super().__init__('x coordinate %r is not an integer' % (x,))


# Interpolating over the decoded points

class InterpolationError(PolyconstError, ArithmeticError):
    pass


class EmptyPointSet(InterpolationError):
    def __init__(self):
        super().__init__('cannot interpolate over zero points')


class DuplicateXError(InterpolationError):
    def __init__(self, x):
        self.x = x
        super().__init__('x coordinate %d appears more than once' % x)


class NonExactDivision(InterpolationError):
    def __init__(self, numerator, denominator, remainder):
        self.numerator = numerator
        self.denominator = denominator
        self.remainder = remainder
        super().__init__('constant term %d/%d is not an integer (remainder %d)' %
                         (numerator, denominator, remainder))


# Reading raw input documents

class RecordError(PolyconstError, ValueError):
    pass


class InsufficientPoints(RecordError):
    def __init__(self, have, need):
        self.have = have
        self.need = need
        super().__init__('need at least %d points, got %d' % (need, have))
