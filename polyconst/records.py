import json
import logging
import re
from collections import namedtuple
from collections.abc import Mapping

from .decoder import Record
from .errors import InsufficientPoints, RecordError

logger = logging.getLogger(__name__)

Keys = namedtuple('Keys', ['n', 'k'])

METADATA_KEY = 'keys'

# Bases sometimes arrive decorated, eg. '^16'
BASE_MARKERS = '^'
DIGITS = re.compile(r'[0-9]+')


# Only the leading markers are removed. Whatever remains is handed to the
# decoder unchanged, which rejects bases such as '-16' or '1.6'.
def strip_base(base):
    if not isinstance(base, str):
        return base
    stripped = base.strip().lstrip(BASE_MARKERS)
    if not stripped:
        raise RecordError('base %r contains no digits' % (base,))
    return int(stripped) if DIGITS.fullmatch(stripped) else stripped


def value_digits(value):
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise RecordError('value %r must be a string of digits' % (value,))


def parse_keys(block):
    if not isinstance(block, Mapping):
        raise RecordError('metadata block must be an object, got %r' % (block,))
    try:
        return Keys(int(block['n']), int(block['k']))
    except (KeyError, TypeError, ValueError) as e:
        raise RecordError('malformed metadata block %r' % (block,)) from e


def parse_records(document):
    """
    Split a raw input document into decode records and its metadata.

    The document maps each x, written as a decimal string, to an object
    holding the 'base' and the encoded 'value'. The 'keys' entry carries
    the record count n and the threshold k and is returned separately;
    it never reaches the decoder.
    """
    if not isinstance(document, Mapping):
        raise RecordError('input must be a JSON object, got %s' % type(document).__name__)
    records = []
    keys = None
    for key, entry in document.items():
        if key == METADATA_KEY:
            keys = parse_keys(entry)
            continue
        if not isinstance(entry, Mapping) or 'base' not in entry or 'value' not in entry:
            raise RecordError('entry %r needs a base and a value' % (key,))
        records.append(Record(key, strip_base(entry['base']), value_digits(entry['value'])))
    return records, keys


def load_records(path):
    with open(path, encoding='utf-8') as f:
        try:
            document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RecordError('%s is not valid JSON: %s' % (path, e)) from e
    return parse_records(document)


def check_keys(records, keys):
    if keys is None:
        return
    if keys.n != len(records):
        logger.warning('metadata says n=%d but %d records were supplied', keys.n, len(records))
    if len(records) < keys.k:
        raise InsufficientPoints(len(records), keys.k)
