"""
Shared test helpers for gnucashledger unit tests.

Factory functions for the flat records the builders consume, and a
small writer for GNU Cash XML documents.
"""

from gnucashledger.records import (AccountRecord, BookRecord, SplitRecord,
                                   TransactionRecord)


# ---------------------------------------------------------------------------
# Record factories
# ---------------------------------------------------------------------------


def make_account_record(guid, actype, name, parent_guid="", currency="EUR",
                        description=""):
    return AccountRecord(guid=guid, actype=actype, name=name,
                         description=description, parent_guid=parent_guid,
                         currency=currency)


def make_split_record(guid, account_guid, value, quantity=None, memo="",
                      reconcile_date=""):
    return SplitRecord(guid=guid, value=value,
                       quantity=value if quantity is None else quantity,
                       account_guid=account_guid, memo=memo,
                       reconcile_date=reconcile_date)


def make_transaction_record(guid, date_posted, splits, description="",
                            date_entered=None, currency="EUR"):
    return TransactionRecord(guid=guid, date_posted=date_posted,
                             date_entered=date_entered or date_posted,
                             currency=currency, description=description,
                             splits=splits)


def make_book_record(accounts, transactions=(), guid="book-1"):
    return BookRecord(guid=guid, accounts=list(accounts),
                      transactions=list(transactions))


# ---------------------------------------------------------------------------
# XML writer
# ---------------------------------------------------------------------------

XML_HEADER = """<?xml version="1.0" encoding="utf-8" ?>
<gnc-v2
     xmlns:gnc="http://www.gnucash.org/XML/gnc"
     xmlns:act="http://www.gnucash.org/XML/act"
     xmlns:book="http://www.gnucash.org/XML/book"
     xmlns:cd="http://www.gnucash.org/XML/cd"
     xmlns:cmdty="http://www.gnucash.org/XML/cmdty"
     xmlns:slot="http://www.gnucash.org/XML/slot"
     xmlns:split="http://www.gnucash.org/XML/split"
     xmlns:trn="http://www.gnucash.org/XML/trn"
     xmlns:ts="http://www.gnucash.org/XML/ts">
<gnc:count-data cd:type="book">1</gnc:count-data>
"""

XML_FOOTER = "</gnc-v2>\n"


def account_xml(guid, actype, name, parent_guid=None, currency="EUR",
                description=None, slots=""):
    parts = ['<gnc:account version="2.0.0">',
             "<act:name>{}</act:name>".format(name),
             '<act:id type="guid">{}</act:id>'.format(guid),
             "<act:type>{}</act:type>".format(actype)]
    if parent_guid is not None:
        parts.append("<act:commodity><cmdty:space>ISO4217</cmdty:space>"
                     "<cmdty:id>{}</cmdty:id></act:commodity>"
                     .format(currency))
        parts.append("<act:commodity-scu>100</act:commodity-scu>")
    if description is not None:
        parts.append("<act:description>{}</act:description>"
                     .format(description))
    if slots:
        parts.append("<act:slots>{}</act:slots>".format(slots))
    if parent_guid is not None:
        parts.append('<act:parent type="guid">{}</act:parent>'
                     .format(parent_guid))
    parts.append("</gnc:account>")
    return "\n".join(parts)


def split_xml(guid, account_guid, value, memo=None, reconcile_date=None):
    parts = ["<trn:split>",
             '<split:id type="guid">{}</split:id>'.format(guid)]
    if memo is not None:
        parts.append("<split:memo>{}</split:memo>".format(memo))
    parts.append("<split:reconciled-state>n</split:reconciled-state>")
    if reconcile_date is not None:
        parts.append("<split:reconcile-date><ts:date>{}</ts:date>"
                     "</split:reconcile-date>".format(reconcile_date))
    parts.append("<split:value>{}</split:value>".format(value))
    parts.append("<split:quantity>{}</split:quantity>".format(value))
    parts.append('<split:account type="guid">{}</split:account>'
                 .format(account_guid))
    parts.append("</trn:split>")
    return "\n".join(parts)


def transaction_xml(guid, date_posted, description, splits,
                    currency="EUR", slots=""):
    parts = ['<gnc:transaction version="2.0.0">',
             '<trn:id type="guid">{}</trn:id>'.format(guid),
             "<trn:currency><cmdty:space>ISO4217</cmdty:space>"
             "<cmdty:id>{}</cmdty:id></trn:currency>".format(currency),
             "<trn:date-posted><ts:date>{}</ts:date></trn:date-posted>"
             .format(date_posted),
             "<trn:date-entered><ts:date>{}</ts:date></trn:date-entered>"
             .format(date_posted),
             "<trn:description>{}</trn:description>".format(description)]
    if slots:
        parts.append("<trn:slots>{}</trn:slots>".format(slots))
    parts.append("<trn:splits>")
    parts.extend(splits)
    parts.append("</trn:splits>")
    parts.append("</gnc:transaction>")
    return "\n".join(parts)


def book_xml(guid, accounts, transactions=(), slots=""):
    parts = ['<gnc:book version="2.0.0">',
             '<book:id type="guid">{}</book:id>'.format(guid)]
    if slots:
        parts.append("<book:slots>{}</book:slots>".format(slots))
    parts.extend(accounts)
    parts.extend(transactions)
    parts.append("</gnc:book>")
    return "\n".join(parts)


def gnucash_xml(*books):
    return XML_HEADER + "\n".join(books) + "\n" + XML_FOOTER
