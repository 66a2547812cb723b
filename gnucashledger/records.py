# records.py --- Flat records read from a GNU Cash file


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

# These hold the text exactly as found in the file. Nothing is
# validated here; the builders in accounts.py and transactions.py do
# that.


class AccountRecord:
    def __init__(self, guid, actype, name, description="", parent_guid="",
                 currency="", slots=None):
        self.guid = guid
        self.actype = actype
        self.name = name
        self.description = description or ""
        self.parent_guid = parent_guid or ""
        self.currency = currency or ""
        self.slots = slots or {}

    def __repr__(self):
        return "<AccountRecord {}>".format(self.guid)


class SplitRecord:
    def __init__(self, guid, value, quantity, account_guid,
                 reconciled_state="n", reconcile_date="", memo="",
                 slots=None):
        self.guid = guid
        self.reconciled_state = reconciled_state
        self.reconcile_date = reconcile_date or ""
        self.value = value
        self.quantity = quantity
        self.account_guid = account_guid
        self.memo = memo or ""
        self.slots = slots or {}

    def __repr__(self):
        return "<SplitRecord {}>".format(self.guid)


class TransactionRecord:
    def __init__(self, guid, date_posted, date_entered, currency="",
                 description="", splits=None, slots=None):
        self.guid = guid
        self.currency = currency or ""
        self.date_posted = date_posted
        self.date_entered = date_entered
        self.description = description or ""
        self.splits = splits or []
        self.slots = slots or {}

    def __repr__(self):
        return "<TransactionRecord {}>".format(self.guid)


class BookRecord:
    def __init__(self, guid, accounts=None, transactions=None, slots=None):
        self.guid = guid
        self.accounts = accounts or []
        self.transactions = transactions or []
        self.slots = slots or {}

    def __repr__(self):
        return "<BookRecord {}>".format(self.guid)
