"""Domain layer for finance-wrapped."""

_EXPORTS = {
    "Store": "finance_wrapped.domain.store",
    "TransactionLedger": "finance_wrapped.domain.ledger",
    "TemplateStore": "finance_wrapped.domain.csv_template",
    "CategoryStore": "finance_wrapped.domain.category",
    "StatementHistory": "finance_wrapped.domain.statement",
    "OverlapDetector": "finance_wrapped.domain.overlap",
    "CSVImportEngine": "finance_wrapped.domain.csv_import",
    "CSVImportService": "finance_wrapped.domain.csv_import",
    "SplitService": "finance_wrapped.domain.split",
    "BulkEditService": "finance_wrapped.domain.bulk_edit",
    "BackupRestoreService": "finance_wrapped.domain.backup",
}

__all__ = list(_EXPORTS)


# Services are imported lazily: the database and utils layers import
# entities and errors from this package.
def __getattr__(name):
    if name in _EXPORTS:
        import importlib

        return getattr(importlib.import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
