import random
import string

import pytest

from polyconst import (DecodeError, EmptyValue, InvalidBase, InvalidDigitForBase,
                       InvalidIndex, MalformedRecord, Point, Record, decode,
                       decode_value, digit_value, encode)

ALPHABET = string.digits + string.ascii_lowercase


def test_known_values():
    assert decode_value('1a', 16) == 26
    assert decode_value('1A', 16) == 26
    assert decode_value('101', 2) == 5
    assert decode_value('zz', 36) == 35 * 36 + 35
    assert decode_value('0', 7) == 0


def test_base_is_never_guessed():
    # Letters do not imply hexadecimal and their absence does not imply decimal
    assert decode_value('10', 16) == 16
    assert decode_value('ij', 20) == 18 * 20 + 19
    with pytest.raises(InvalidDigitForBase):
        decode_value('1a', 10)


def test_round_trip():
    rng = random.Random(31337)
    for base in range(2, 37):
        for _ in range(20):
            s = ''.join(rng.choice(ALPHABET[:base]) for _ in range(rng.randint(1, 40)))
            assert encode(decode_value(s, base), base) == (s.lstrip('0') or '0')


def test_large_values_are_exact():
    assert decode_value('1' + '0' * 200, 36) == 36 ** 200
    assert decode_value('f' * 300, 16) == 16 ** 300 - 1


def test_invalid_digits():
    for digits, base in [('2', 2), ('g', 16), ('G', 16), ('z', 35), ('-1', 10), ('1 0', 10), ('1.5', 10)]:
        with pytest.raises(InvalidDigitForBase) as e:
            decode_value(digits, base)
        assert e.value.base == base


def test_invalid_base():
    for base in [0, 1, -16, 37, 100]:
        with pytest.raises(InvalidBase):
            decode({'x': '1', 'base': base, 'digits': '1'})
    with pytest.raises(InvalidBase):
        decode({'x': '1', 'base': 'sixteen', 'digits': '1'})
    with pytest.raises(InvalidBase):
        encode(5, 1)


def test_empty_value():
    with pytest.raises(EmptyValue):
        decode(Record('1', 10, ''))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode(Record('1', 2, '3'))
    assert issubclass(InvalidBase, DecodeError)


def test_case_sensitive_alphabet():
    assert digit_value('a') == digit_value('A') == 10
    assert digit_value('a', case_sensitive=True) == 36
    assert digit_value('A', case_sensitive=True) == 10
    assert digit_value('!') is None
    assert decode_value('z', 62, case_sensitive=True) == 61
    assert decode_value('1A', 16, case_sensitive=True) == 26
    with pytest.raises(InvalidDigitForBase):
        decode_value('1a', 16, case_sensitive=True)
    assert decode({'x': 3, 'base': 40, 'digits': '10'}, case_sensitive=True) == Point(3, 40)
    assert encode(36, 62, case_sensitive=True) == 'a'
    assert encode(26, 16, case_sensitive=True) == '1A'


def test_decode_records():
    assert decode(Record('2', '2', '111')) == Point(2, 7)
    assert decode({'x': '-5', 'base': 16, 'digits': 'ff'}) == Point(-5, 255)
    assert decode((' 12 ', 8, '17')) == Point(12, 15)
    assert decode(Record(10 ** 40, 10, '9')) == Point(10 ** 40, 9)


def test_invalid_index():
    for x in ['1.5', 'abc', '', None, 2.0]:
        with pytest.raises(InvalidIndex):
            decode(Record(x, 10, '1'))


def test_malformed_records():
    for record in [{'x': '1', 'base': 10}, {'base': 10, 'digits': '1'}, ('1', 10),
                   ('1', 10, '1', 'extra'), 5, None, Record('1', 2, 101), Record('1', 2, None)]:
        with pytest.raises(MalformedRecord):
            decode(record)
    assert issubclass(MalformedRecord, DecodeError)
