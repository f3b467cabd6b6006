from .decoder import Point, Record, decode, decode_value, digit_value, encode
from .errors import (DecodeError, DuplicateXError, EmptyPointSet, EmptyValue,
                     InsufficientPoints, InterpolationError, InvalidBase,
                     InvalidDigitForBase, InvalidIndex, MalformedRecord,
                     NonExactDivision, PolyconstError, RecordError)
from .interpolate import interpolate_at_zero, lagrange_term
from .records import Keys, check_keys, load_records, parse_records
from .cli import solve
