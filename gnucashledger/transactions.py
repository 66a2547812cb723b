# transactions.py --- GNU Cash transactions, splits and the ledger


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

import logging
import re

from dateutil.parser import parse as parse_date

from .accounts import post_transactions
from .errors import (MalformedNumericError, MalformedTimestampError,
                     SplitAccountNotFoundError)
from .numeric import parse_numeric

logger = logging.getLogger(__name__)

# GNU Cash writes every timestamp as "2014-03-01 10:59:00 +0100".
_TIMESTAMP_RE = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2}) "
    r"([0-9]{2}):([0-9]{2}):([0-9]{2}) [+-][0-9]{4}$")


class Transaction:
    """
    A transaction is a balanced group of splits.
    """
    def __init__(self, guid, date_posted, date_entered, currency="",
                 description="", splits=(), slots=None):
        self.guid = guid
        self.currency = currency
        self.date_posted = date_posted
        self.date_entered = date_entered
        self.description = description
        self.splits = tuple(splits)
        self.slots = slots or {}

    def __repr__(self):
        return "<Transaction {}>".format(self.guid)


class Split:
    """
    A split is one entry in a transaction.

    value is in the currency of the transaction, quantity in the
    commodity of the account.
    """
    def __init__(self, guid, value, quantity, account,
                 reconciled_state="n", reconcile_date=None, memo="",
                 transaction=None, slots=None):
        self.guid = guid
        self.reconciled_state = reconciled_state
        self.reconcile_date = reconcile_date
        self.value = value
        self.quantity = quantity
        self.account = account
        self.transaction = transaction
        self.memo = memo
        self.slots = slots or {}

    def __repr__(self):
        return "<Split {}>".format(self.guid)


def parse_timestamp(text, nullable=False, record_id=None, field=None):
    """
    Parse a GNU Cash timestamp into an aware datetime.

    With nullable set, empty text gives None instead of an error.
    """
    if nullable and not text:
        return None
    match = _TIMESTAMP_RE.match(text.strip()) if text is not None else None
    if match is None:
        raise MalformedTimestampError("Invalid timestamp",
                                      record_id=record_id,
                                      field=field,
                                      value=text)
    try:
        timestamp = parse_date(text)
    except (ValueError, OverflowError) as exc:
        raise MalformedTimestampError("Invalid timestamp",
                                      record_id=record_id,
                                      field=field,
                                      value=text) from exc
    # dateutil is lenient about field order, e.g. "2014-13-01".
    fields = (timestamp.year, timestamp.month, timestamp.day,
              timestamp.hour, timestamp.minute, timestamp.second)
    if fields != tuple(int(group) for group in match.groups()):
        raise MalformedTimestampError("Invalid timestamp",
                                      record_id=record_id,
                                      field=field,
                                      value=text)
    return timestamp


def _parse_split_numeric(record, field):
    try:
        return parse_numeric(getattr(record, field))
    except MalformedNumericError as exc:
        raise exc.with_context(record_id=record.guid, field=field) from exc


def _split_from_record(record, accounts):
    reconcile_date = parse_timestamp(record.reconcile_date, nullable=True,
                                     record_id=record.guid,
                                     field="reconcile-date")
    value = _parse_split_numeric(record, "value")
    quantity = _parse_split_numeric(record, "quantity")
    account = accounts.get(record.account_guid)
    if account is None:
        raise SplitAccountNotFoundError("Account not found",
                                        record_id=record.guid,
                                        field="account",
                                        value=record.account_guid)
    return Split(guid=record.guid,
                 value=value,
                 quantity=quantity,
                 account=account,
                 reconciled_state=record.reconciled_state,
                 reconcile_date=reconcile_date,
                 memo=record.memo,
                 slots=record.slots)


def _transaction_from_record(record, accounts):
    date_posted = parse_timestamp(record.date_posted,
                                  record_id=record.guid,
                                  field="date-posted")
    date_entered = parse_timestamp(record.date_entered,
                                   record_id=record.guid,
                                   field="date-entered")
    splits = [_split_from_record(split, accounts) for split in record.splits]
    transaction = Transaction(guid=record.guid,
                              date_posted=date_posted,
                              date_entered=date_entered,
                              currency=record.currency,
                              description=record.description,
                              splits=splits,
                              slots=record.slots)
    for split in splits:
        split.transaction = transaction
    return transaction


def build_ledger(records, accounts):
    """
    Build the transactions of a book and post them to their accounts.

    Returns the transactions sorted by date posted. Transactions
    posted at the same time keep the order of the file.
    """
    transactions = [_transaction_from_record(record, accounts)
                    for record in records]
    transactions.sort(key=lambda transaction: transaction.date_posted)
    logger.debug("Built %d transactions", len(transactions))
    post_transactions(accounts, transactions)
    return transactions
