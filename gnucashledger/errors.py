# errors.py --- Errors raised while building a GNU Cash ledger

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


class LedgerError(ValueError):
    """
    Base class for all structural errors found while building a book.

    Carries the id of the offending record, the field that was being
    read and the offending value, whenever they are known.
    """
    def __init__(self, message, record_id=None, field=None, value=None):
        self.message = message
        self.record_id = record_id
        self.field = field
        self.value = value
        super().__init__(self._format())

    def _format(self):
        context = []
        if self.record_id is not None:
            context.append("id={}".format(self.record_id))
        if self.field is not None:
            context.append("field={}".format(self.field))
        if self.value is not None:
            context.append("value={!r}".format(self.value))
        if not context:
            return self.message
        return "{} ({})".format(self.message, ", ".join(context))

    def with_context(self, record_id=None, field=None):
        """Return a copy of this error located at the given record."""
        return type(self)(self.message,
                          record_id=record_id,
                          field=field,
                          value=self.value)


class InvalidFileError(LedgerError):
    pass


class UnknownSlotTypeError(LedgerError):
    pass


class MalformedNumericError(LedgerError):
    pass


class DivisionByZeroError(MalformedNumericError, ZeroDivisionError):
    pass


class MalformedTimestampError(LedgerError):
    pass


class DuplicateAccountIDError(LedgerError):
    pass


class UnknownAccountTypeError(LedgerError):
    pass


class InvalidRootTypeError(LedgerError):
    pass


class MultipleRootsError(LedgerError):
    pass


class NoRootError(LedgerError):
    pass


class ParentNotFoundError(LedgerError):
    pass


class ParentCycleError(LedgerError):
    pass


class MalformedSlotError(LedgerError):
    pass


class SplitAccountNotFoundError(LedgerError):
    pass


class NoBookFoundError(LedgerError):
    pass


class MultipleBooksNotSupportedError(LedgerError):
    pass
