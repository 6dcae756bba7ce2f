"""
flowcsv – CSV export action for flow orchestration.

Import path convention::

    from flowcsv.application.export import CsvExportAction, ExportRequest
    from flowcsv.application.files import InMemoryFileStore
    from flowcsv.adapters.salesforce import SalesforceFileStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
