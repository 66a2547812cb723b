# cli.py --- Command line interface


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
import time
from pathlib import Path

import click

from . import __version__
from .config import LedgerConfig, setup_logging
from .errors import LedgerError
from .xmlfile import from_filename

logger = logging.getLogger(__name__)


def string_pad(s, n, pad):
    """Cut s to n characters, or pad it up to n characters with pad."""
    if n <= 0:
        return ""
    if len(s) >= n:
        return s[:n]
    return s + pad * (n - len(s))


def format_tree(book, indent="  "):
    lines = []

    def visit(account, level):
        lines.append("{}[{}] {} ({})".format(
            indent * level, account.account_type.label.upper(),
            account.name, account.currency))
        for child in account.children:
            visit(child, level + 1)

    visit(book.root_account, 0)
    return lines


def format_register(account, description_width=41):
    lines = []
    for index, entry in enumerate(account.entries, 1):
        lines.append("{:02d}) {} {} {:5.2f} {:7.2f} {:7.0f}".format(
            index,
            entry.date.strftime("%Y-%m-%d"),
            string_pad(entry.description, description_width, "."),
            float(entry.plus_value),
            float(entry.minus_value),
            float(entry.balance)))
    return lines


def book_file_option(func):
    """--file/-f: path to a GNU Cash file, defaults to the configured one."""
    return click.option(
        "--file",
        "-f",
        "book_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Path to the GNU Cash file (.gnucash).",
    )(func)


def _load_book(ctx, book_file):
    config = ctx.obj
    if book_file is None:
        if not config.gnucash_file:
            raise click.UsageError(
                "No GNU Cash file given; use --file or set "
                "GNUCASH_LEDGER_FILE.")
        book_file = Path(config.gnucash_file)
    start = time.perf_counter()
    try:
        book = from_filename(book_file)
    except (LedgerError, OSError) as exc:
        click.echo("Error: {}".format(exc), err=True)
        ctx.exit(1)
    logger.debug("Loaded %s in %.3fs", book_file,
                 time.perf_counter() - start)
    return book


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Enable debug logging.")
@click.pass_context
def main(ctx, verbose):
    """gnucash-ledger - account registers and balances from GNU Cash files."""
    try:
        config = LedgerConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc))
    config.verbose = config.verbose or verbose
    setup_logging(config.verbose)
    ctx.obj = config


@main.command()
@book_file_option
@click.pass_context
def summary(ctx, book_file):
    """Show the number of accounts and transactions."""
    book = _load_book(ctx, book_file)
    click.echo("book: {}".format(book.guid))
    click.echo("accounts: {}".format(len(book.accounts)))
    click.echo("transactions: {}".format(len(book.transactions)))


@main.command()
@book_file_option
@click.option("--indent", default=None,
              help="Indentation per tree level (default: two spaces).")
@click.pass_context
def tree(ctx, book_file, indent):
    """Print the account tree."""
    book = _load_book(ctx, book_file)
    for line in format_tree(book, indent or ctx.obj.indent):
        click.echo(line)


@main.command()
@book_file_option
@click.argument("account_name")
@click.option("--width", type=int, default=None,
              help="Width of the description column.")
@click.pass_context
def register(ctx, book_file, account_name, width):
    """Print the entries of ACCOUNT_NAME with running balances."""
    book = _load_book(ctx, book_file)
    account = (book.find_account(account_name) or
               book.accounts.find_by_fullname(account_name))
    if account is None:
        click.echo("Error: account not found: {}".format(account_name),
                   err=True)
        ctx.exit(1)
    for line in format_register(account, width or ctx.obj.description_width):
        click.echo(line)
    click.echo("balance: {:.2f}".format(float(account.balance)))
