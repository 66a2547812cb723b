"""
Shared pytest fixtures for gnucashledger tests.
"""

import gzip

import pytest

from tests.helpers import (account_xml, book_xml, gnucash_xml,
                           make_account_record, make_book_record,
                           make_split_record, make_transaction_record,
                           split_xml, transaction_xml)


@pytest.fixture
def account_records():
    """
    Root
      Assets (ASSET)
        Bank (BANK)
      Income (INCOME)
        Salary (INCOME)
    """
    return [
        make_account_record("root", "ROOT", "Root Account"),
        make_account_record("income", "INCOME", "Income", parent_guid="root"),
        make_account_record("bank", "BANK", "Bank", parent_guid="assets"),
        make_account_record("assets", "ASSET", "Assets", parent_guid="root"),
        make_account_record("salary", "INCOME", "Salary",
                            parent_guid="income"),
    ]


@pytest.fixture
def transaction_records():
    """
    Out of order on purpose:

        t2  2014-02-01  Groceries  bank -40, salary +40
        t1  2014-01-01  Paycheck   bank +100, salary -100
    """
    return [
        make_transaction_record("t2", "2014-02-01 10:00:00 +0100", [
            make_split_record("s2a", "bank", "-4000/100", memo="Groceries"),
            make_split_record("s2b", "salary", "4000/100"),
        ], description="Shopping"),
        make_transaction_record("t1", "2014-01-01 10:00:00 +0100", [
            make_split_record("s1a", "bank", "10000/100"),
            make_split_record("s1b", "salary", "-10000/100"),
        ], description="Paycheck"),
    ]


@pytest.fixture
def book_record(account_records, transaction_records):
    return make_book_record(account_records, transaction_records)


@pytest.fixture
def sample_xml():
    """A GNU Cash document with the same book as book_record."""
    accounts = [
        account_xml("root", "ROOT", "Root Account"),
        account_xml("income", "INCOME", "Income", parent_guid="root"),
        account_xml("bank", "BANK", "Bank", parent_guid="assets",
                    description="Checking account"),
        account_xml("assets", "ASSET", "Assets", parent_guid="root"),
        account_xml("salary", "INCOME", "Salary", parent_guid="income"),
    ]
    transactions = [
        transaction_xml("t2", "2014-02-01 10:00:00 +0100", "Shopping", [
            split_xml("s2a", "bank", "-4000/100", memo="Groceries"),
            split_xml("s2b", "salary", "4000/100"),
        ]),
        transaction_xml("t1", "2014-01-01 10:00:00 +0100", "Paycheck", [
            split_xml("s1a", "bank", "10000/100",
                      reconcile_date="2014-01-31 00:00:00 +0100"),
            split_xml("s1b", "salary", "-10000/100"),
        ]),
    ]
    return gnucash_xml(book_xml("book-1", accounts, transactions))


@pytest.fixture
def gnucash_file(tmp_path, sample_xml):
    """sample_xml written as a compressed .gnucash file."""
    path = tmp_path / "data.gnucash"
    with gzip.open(path, "wb") as fobj:
        fobj.write(sample_xml.encode("utf-8"))
    return path


@pytest.fixture
def plain_gnucash_file(tmp_path, sample_xml):
    """sample_xml written uncompressed."""
    path = tmp_path / "plain.gnucash"
    path.write_text(sample_xml, encoding="utf-8")
    return path
