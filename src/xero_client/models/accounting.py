"""
Accounting API models.
"""

from ..config import API_CORE
from ..remote.model import RemoteModel


class Account(RemoteModel):
    RESOURCE_URI = "Accounts"
    API_STEM = API_CORE
    GUID_PROPERTY = "AccountID"


class BankTransaction(RemoteModel):
    RESOURCE_URI = "BankTransactions"
    API_STEM = API_CORE
    PAGEABLE = True
    GUID_PROPERTY = "BankTransactionID"


class Contact(RemoteModel):
    RESOURCE_URI = "Contacts"
    API_STEM = API_CORE
    PAGEABLE = True
    GUID_PROPERTY = "ContactID"


class Invoice(RemoteModel):
    RESOURCE_URI = "Invoices"
    API_STEM = API_CORE
    PAGEABLE = True
    GUID_PROPERTY = "InvoiceID"


class Item(RemoteModel):
    RESOURCE_URI = "Items"
    API_STEM = API_CORE
    GUID_PROPERTY = "ItemID"


class TaxRate(RemoteModel):
    # Tax rates are keyed by TaxType and have no GUID
    RESOURCE_URI = "TaxRates"
    API_STEM = API_CORE


MODELS = [Account, BankTransaction, Contact, Invoice, Item, TaxRate]

__all__ = [
    "Account",
    "BankTransaction",
    "Contact",
    "Invoice",
    "Item",
    "TaxRate",
    "MODELS",
]
