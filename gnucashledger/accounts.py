# accounts.py --- The GNU Cash account tree


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

from .accounttypes import get_account_type
from .errors import (DuplicateAccountIDError, InvalidRootTypeError,
                     MultipleRootsError, NoRootError, ParentCycleError,
                     ParentNotFoundError)
from .numeric import ZERO

logger = logging.getLogger(__name__)


class Account:
    """
    An account is part of a tree structure of accounts and has a
    chronological list of entries, one per split posted to it.
    """
    def __init__(self, guid, account_type, name, description="",
                 currency="", slots=None):
        self.guid = guid
        self.account_type = account_type
        self.name = name
        self.description = description
        self.currency = currency
        self.parent = None
        self.children = []
        self.entries = ()
        self.slots = slots or {}

    def __repr__(self):
        return "<Account {}>".format(self.guid)

    @property
    def actype(self):
        return self.account_type.tag

    @property
    def fullname(self):
        """Colon separated path of names, without the root account."""
        names = []
        account = self
        while account is not None and not account.account_type.is_root:
            names.append(account.name)
            account = account.parent
        return ":".join(reversed(names))

    @property
    def balance(self):
        """The running balance after the last entry, or zero."""
        if not self.entries:
            return ZERO
        return self.entries[-1].balance

    def walk(self):
        """
        Generate the accounts in this account tree, breadth first.

        For each account, it yields a 3-tuple (account, subaccounts,
        entries).
        """
        accounts = [self]
        while accounts:
            acc, accounts = accounts[0], accounts[1:]
            children = list(acc.children)
            yield (acc, children, acc.entries)
            accounts.extend(children)


class AccountEntry:
    """
    One split as seen from the account it was posted to.

    plus_value and minus_value hold the magnitude of the split value,
    bucketed by its sign; balance is the running balance of the account
    after this entry.
    """
    __slots__ = ("transaction", "split", "plus_value", "minus_value",
                 "balance")

    def __init__(self, transaction, split, plus_value=ZERO,
                 minus_value=ZERO, balance=ZERO):
        self.transaction = transaction
        self.split = split
        self.plus_value = plus_value
        self.minus_value = minus_value
        self.balance = balance

    def __repr__(self):
        return "<AccountEntry {}>".format(self.split.guid)

    @property
    def account(self):
        return self.split.account

    @property
    def date(self):
        return self.transaction.date_posted

    @property
    def value(self):
        return self.split.value

    @property
    def description(self):
        """The split memo if there is one, else the transaction's."""
        if self.split.memo:
            return self.split.memo
        return self.transaction.description


class Accounts:
    """
    The account tree of a book: a single root account plus a lookup
    table from account guid to account.
    """
    def __init__(self, root, by_guid):
        self.root = root
        self.by_guid = by_guid

    def __repr__(self):
        return "<Accounts {} accounts>".format(len(self.by_guid))

    def __len__(self):
        return len(self.by_guid)

    def __iter__(self):
        return iter(self.by_guid.values())

    def __contains__(self, guid):
        return guid in self.by_guid

    def __getitem__(self, guid):
        return self.by_guid[guid]

    def get(self, guid, default=None):
        return self.by_guid.get(guid, default)

    def walk(self):
        return self.root.walk()

    def find_by_name(self, name):
        """
        Return the first account called name, or None.

        Accounts are scanned in the order they were read from the file,
        so with duplicate names the earliest one wins.
        """
        for account in self.by_guid.values():
            if account.name == name:
                return account
        return None

    def find_by_fullname(self, fullname):
        for account in self.by_guid.values():
            if account.fullname == fullname:
                return account
        return None


def build_accounts(records):
    """
    Build the account tree from a flat list of AccountRecord.

    Every account but the root must name an existing parent. Children
    are sorted by name.
    """
    by_guid = {}
    for record in records:
        if record.guid in by_guid:
            raise DuplicateAccountIDError("Multiple accounts with same id",
                                          record_id=record.guid,
                                          field="id",
                                          value=record.guid)
        account_type = get_account_type(record.actype, record_id=record.guid)
        by_guid[record.guid] = Account(guid=record.guid,
                                       account_type=account_type,
                                       name=record.name,
                                       description=record.description,
                                       currency=record.currency,
                                       slots=record.slots)

    root = None
    for record in records:
        account = by_guid[record.guid]
        if not record.parent_guid:
            if not account.account_type.is_root:
                raise InvalidRootTypeError("Account without parent must be "
                                           "of type ROOT",
                                           record_id=record.guid,
                                           field="type",
                                           value=record.actype)
            if root is not None:
                raise MultipleRootsError("Multiple root accounts",
                                         record_id=record.guid)
            root = account
        else:
            parent = by_guid.get(record.parent_guid)
            if parent is None:
                raise ParentNotFoundError("Parent account not found",
                                          record_id=record.guid,
                                          field="parent",
                                          value=record.parent_guid)
            account.parent = parent
            parent.children.append(account)

    if root is None:
        raise NoRootError("No root account found")

    reached = set()
    pending = [root]
    while pending:
        account = pending.pop()
        reached.add(account.guid)
        pending.extend(account.children)
    for record in records:
        if record.guid not in reached:
            raise ParentCycleError("Account is not reachable from the root",
                                   record_id=record.guid,
                                   field="parent",
                                   value=record.parent_guid)

    for account in by_guid.values():
        account.children = tuple(sorted(account.children,
                                        key=lambda acc: acc.name))

    logger.debug("Built account tree with %d accounts", len(by_guid))
    return Accounts(root, by_guid)


def post_transactions(accounts, transactions):
    """
    Fill in the entries of every account.

    transactions must already be in chronological order; each
    account's entries then are too.
    """
    entries = {account.guid: [] for account in accounts}
    for transaction in transactions:
        for split in transaction.splits:
            entries[split.account.guid].append(
                AccountEntry(transaction, split))

    for account in accounts:
        balance = ZERO
        for entry in entries[account.guid]:
            value = entry.split.value
            balance = balance + value
            entry.balance = balance
            if value.sign() >= 0:
                entry.plus_value = value
            else:
                entry.minus_value = value.negate()
        account.entries = tuple(entries[account.guid])

    logger.debug("Posted %d transactions to %d accounts",
                 len(transactions), len(accounts))
