# book.py --- The GNU Cash book


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

from .accounts import build_accounts
from .errors import MultipleBooksNotSupportedError, NoBookFoundError
from .transactions import build_ledger

logger = logging.getLogger(__name__)


class Book:
    """
    A book is the main container for GNU Cash data.

    It holds the account tree and the transactions in the order they
    were posted. A book is built once and never changed afterwards.
    """
    def __init__(self, guid, accounts, transactions=(), slots=None):
        self.guid = guid
        self.accounts = accounts
        self.transactions = tuple(transactions)
        self.slots = slots or {}

    def __repr__(self):
        return "<Book {}>".format(self.guid)

    @classmethod
    def from_record(cls, record):
        accounts = build_accounts(record.accounts)
        transactions = build_ledger(record.transactions, accounts)
        logger.debug("Built book %s", record.guid)
        return cls(guid=record.guid,
                   accounts=accounts,
                   transactions=transactions,
                   slots=record.slots)

    @classmethod
    def from_records(cls, records):
        """Build the book from a file; it must hold exactly one book."""
        records = list(records)
        if not records:
            raise NoBookFoundError("No book found")
        if len(records) > 1:
            raise MultipleBooksNotSupportedError(
                "Multiple books are not supported",
                value=len(records))
        return cls.from_record(records[0])

    @property
    def root_account(self):
        return self.accounts.root

    def walk(self):
        return self.accounts.walk()

    def get_account(self, guid):
        return self.accounts.get(guid)

    def find_account(self, name):
        return self.accounts.find_by_name(name)
