# gnucashledger --- Account registers and balances from GNU Cash files


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

from .accounts import Account, AccountEntry, Accounts
from .accounttypes import ACCOUNT_TYPES, AccountType
from .book import Book
from .errors import LedgerError
from .numeric import Numeric, parse_numeric
from .transactions import Split, Transaction
from .xmlfile import from_filename, parse

__version__ = "1.1"

__all__ = [
    "ACCOUNT_TYPES",
    "Account",
    "AccountEntry",
    "AccountType",
    "Accounts",
    "Book",
    "LedgerError",
    "Numeric",
    "Split",
    "Transaction",
    "from_filename",
    "parse",
    "parse_numeric",
]
