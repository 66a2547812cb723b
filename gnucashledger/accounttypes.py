# accounttypes.py --- GNU Cash account types


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

from types import MappingProxyType

from .errors import UnknownAccountTypeError


class AccountType:
    """
    Display metadata for one GNU Cash account type.

    invert_polarity is set for credit-normal accounts (liabilities,
    income, equity), where a positive split value decreases the
    account. The plus and minus labels already name the two raw
    buckets accordingly. It only affects display, never balances.
    """
    __slots__ = ("tag", "label", "is_root", "invert_polarity",
                 "plus_label", "minus_label")

    def __init__(self, tag, label, is_root=False, invert_polarity=False,
                 plus_label="", minus_label=""):
        object.__setattr__(self, "tag", tag)
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "is_root", is_root)
        object.__setattr__(self, "invert_polarity", invert_polarity)
        object.__setattr__(self, "plus_label", plus_label)
        object.__setattr__(self, "minus_label", minus_label)

    def __setattr__(self, name, value):
        raise AttributeError("AccountType is immutable")

    def __repr__(self):
        return "<AccountType {}>".format(self.tag)

    def label_for(self, value):
        """Return the column label for a raw split value."""
        return self.plus_label if value.sign() >= 0 else self.minus_label

    def is_increase(self, value):
        if value.is_zero():
            return False
        return (value.sign() > 0) != self.invert_polarity

    def display_value(self, value):
        """Return value with the sign a report shows for this type."""
        return value.negate() if self.invert_polarity else value


ACCOUNT_TYPES = MappingProxyType({
    at.tag: at for at in [
        AccountType("ROOT", "Root", is_root=True),
        AccountType("ASSET", "Asset",
                    plus_label="Increase", minus_label="Decrease"),
        AccountType("LIABILITY", "Liability", invert_polarity=True,
                    plus_label="Decrease", minus_label="Increase"),
        AccountType("EQUITY", "Equity", invert_polarity=True,
                    plus_label="Decrease", minus_label="Increase"),
        AccountType("INCOME", "Income", invert_polarity=True,
                    plus_label="Charge", minus_label="Income"),
        AccountType("EXPENSE", "Expense",
                    plus_label="Expense", minus_label="Rebate"),
        AccountType("BANK", "Bank",
                    plus_label="Deposit", minus_label="Withdrawal"),
        AccountType("CASH", "Cash",
                    plus_label="Receive", minus_label="Spend"),
        AccountType("CREDIT", "Credit",
                    plus_label="Increase", minus_label="Decrease"),
        AccountType("RECEIVABLE", "Receivable",
                    plus_label="Increase", minus_label="Decrease"),
    ]
})


def get_account_type(tag, record_id=None):
    try:
        return ACCOUNT_TYPES[tag]
    except KeyError:
        raise UnknownAccountTypeError("Unknown account type",
                                      record_id=record_id,
                                      field="type",
                                      value=tag) from None
