# xmlfile.py --- Read GNU Cash XML files


# Copyright (C) 2012 Jorgen Schaefer <forcer@forcix.cx>

# Author: Jorgen Schaefer <forcer@forcix.cx>

# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 3
# of the License, or (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import gzip
import logging
from xml.etree import ElementTree

from dateutil.parser import parse as parse_date

from .book import Book
from .errors import (InvalidFileError, MalformedNumericError,
                     MalformedSlotError, UnknownSlotTypeError)
from .numeric import parse_numeric
from .records import (AccountRecord, BookRecord, SplitRecord,
                      TransactionRecord)

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"

GNC = "{http://www.gnucash.org/XML/gnc}"
BOOK = "{http://www.gnucash.org/XML/book}"
ACT = "{http://www.gnucash.org/XML/act}"
CMDTY = "{http://www.gnucash.org/XML/cmdty}"
TRN = "{http://www.gnucash.org/XML/trn}"
SPLIT = "{http://www.gnucash.org/XML/split}"
TS = "{http://www.gnucash.org/XML/ts}"
SLOT = "{http://www.gnucash.org/XML/slot}"


def from_filename(filename):
    """Parse a GNU Cash file and return a Book object."""
    with open(filename, "rb") as fobj:
        compressed = fobj.read(2) == GZIP_MAGIC
    logger.info("Reading %s (%s)", filename,
                "compressed" if compressed else "plain XML")
    opener = gzip.open if compressed else open
    with opener(filename, "rb") as fobj:
        return parse(fobj)


def parse(fobj):
    """Parse GNU Cash XML data from a file object and return a Book."""
    return Book.from_records(read_books(fobj))


# Implemented:
# - gnc:book
#
# Not implemented:
# - gnc:count-data
#   - This seems to be primarily for integrity checks?
def read_books(fobj):
    """Return one BookRecord per gnc:book element in the stream."""
    try:
        tree = ElementTree.parse(fobj)
    except ElementTree.ParseError as exc:
        raise InvalidFileError("File stream is not valid XML",
                               value=str(exc)) from exc
    root = tree.getroot()
    if root.tag != "gnc-v2":
        raise InvalidFileError("File stream was not a valid GNU Cash v2 "
                               "XML file", field="root", value=root.tag)
    books = [_book_from_tree(child) for child in root.findall(GNC + "book")]
    logger.debug("Found %d books", len(books))
    return books


def _text(tree, path, default=""):
    elt = tree.find(path)
    if elt is None or elt.text is None:
        return default
    return elt.text


def _required_text(tree, path, record_id=None):
    elt = tree.find(path)
    if elt is None:
        raise InvalidFileError("Missing element", record_id=record_id,
                               field=path)
    return elt.text or ""


# Implemented:
# - book:id
# - book:slots
# - gnc:account
# - gnc:transaction
#
# Not implemented:
# - gnc:commodity
# - gnc:schedxaction
# - gnc:template-transactions
# - gnc:count-data
def _book_from_tree(tree):
    guid = _required_text(tree, BOOK + "id")
    accounts = [_account_from_tree(child)
                for child in tree.findall(GNC + "account")]
    transactions = [_transaction_from_tree(child)
                    for child in tree.findall(GNC + "transaction")]
    return BookRecord(guid=guid,
                      accounts=accounts,
                      transactions=transactions,
                      slots=_slots_from_tree(tree.find(BOOK + "slots")))


# Implemented:
# - act:name
# - act:id
# - act:type
# - act:description
# - act:commodity
# - act:parent
# - act:slots
#
# Not implemented:
# - act:commodity-scu
def _account_from_tree(tree):
    guid = _required_text(tree, ACT + "id")
    return AccountRecord(guid=guid,
                         actype=_required_text(tree, ACT + "type", guid),
                         name=_required_text(tree, ACT + "name", guid),
                         description=_text(tree, ACT + "description"),
                         parent_guid=_text(tree, ACT + "parent"),
                         currency=_text(tree, ACT + "commodity/" +
                                        CMDTY + "id"),
                         slots=_slots_from_tree(tree.find(ACT + "slots")))


# Implemented:
# - trn:id
# - trn:currency
# - trn:date-posted
# - trn:date-entered
# - trn:description
# - trn:splits / trn:split
# - trn:slots
def _transaction_from_tree(tree):
    guid = _required_text(tree, TRN + "id")
    splits = [_split_from_tree(child)
              for child in tree.findall(TRN + "splits/" + TRN + "split")]
    return TransactionRecord(
        guid=guid,
        currency=_text(tree, TRN + "currency/" + CMDTY + "id"),
        date_posted=_required_text(tree, TRN + "date-posted/" + TS + "date",
                                   guid),
        date_entered=_required_text(tree,
                                    TRN + "date-entered/" + TS + "date",
                                    guid),
        description=_text(tree, TRN + "description"),
        splits=splits,
        slots=_slots_from_tree(tree.find(TRN + "slots")))


# Implemented:
# - split:id
# - split:memo
# - split:reconciled-state
# - split:reconcile-date
# - split:value
# - split:quantity
# - split:account
# - split:slots
def _split_from_tree(tree):
    guid = _required_text(tree, SPLIT + "id")
    return SplitRecord(
        guid=guid,
        memo=_text(tree, SPLIT + "memo"),
        reconciled_state=_text(tree, SPLIT + "reconciled-state", "n"),
        reconcile_date=_text(tree, SPLIT + "reconcile-date/" + TS + "date"),
        value=_required_text(tree, SPLIT + "value", guid),
        quantity=_required_text(tree, SPLIT + "quantity", guid),
        account_guid=_required_text(tree, SPLIT + "account", guid),
        slots=_slots_from_tree(tree.find(SPLIT + "slots")))


# Implemented:
# - slot
# - slot:key
# - slot:value
# - ts:date
# - gdate
def _slots_from_tree(tree):
    if tree is None:
        return {}
    slots = {}
    for elt in tree.findall("slot"):
        key_elt = elt.find(SLOT + "key")
        value = elt.find(SLOT + "value")
        if key_elt is None or value is None:
            raise InvalidFileError("Slot without key or value",
                                   field="slot")
        key = key_elt.text
        type_ = value.get("type", "string")
        if type_ in ("string", "guid"):
            slots[key] = value.text or ""
        elif type_ == "frame":
            slots[key] = _slots_from_tree(value)
        else:
            slots[key] = _slot_value(key, type_, value)
    return slots


def _parse_gdate(text):
    return parse_date(text).date()


def _slot_value(key, type_, value):
    if type_ == "integer":
        text = value.text
        convert = int
    elif type_ == "numeric":
        try:
            return parse_numeric(value.text)
        except MalformedNumericError as exc:
            raise exc.with_context(field=key) from exc
    elif type_ == "gdate":
        text = _text(value, "gdate", None)
        convert = _parse_gdate
    elif type_ == "timespec":
        text = _text(value, TS + "date", None)
        convert = parse_date
    else:
        raise UnknownSlotTypeError("Unknown slot type", field=key,
                                   value=type_)
    if text is None:
        raise MalformedSlotError("Empty {} slot".format(type_), field=key)
    try:
        return convert(text)
    except (ValueError, OverflowError) as exc:
        raise MalformedSlotError("Invalid {} slot".format(type_),
                                 field=key, value=text) from exc
