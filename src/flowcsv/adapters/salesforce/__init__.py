"""Salesforce adapter – Files (ContentVersion / ContentDocumentLink) storage."""
from flowcsv.adapters.salesforce.files import SalesforceFileStore
from flowcsv.adapters.salesforce.settings import SalesforceSettings, connect

__all__ = ["SalesforceFileStore", "SalesforceSettings", "connect"]
