"""Mapper functions to convert between domain entities and JSON documents.

This layer isolates the on-disk key names (camelCase, as written by earlier
versions of the application) from the domain entities.
"""

import math
from decimal import Decimal
from typing import Any

from finance_wrapped.domain import entities as domain


def _to_decimal(value: Any) -> Decimal:
    # Go through str() so 12.3 stays 12.3 instead of its binary expansion
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise TypeError(f"Invalid amount value: {value!r}")
    return Decimal(str(value))


def _to_number(amount: Decimal) -> int | float | str:
    # Amounts a float cannot hold exactly are written as strings
    if amount == amount.to_integral_value() and amount.adjusted() < 16:
        return int(amount)
    as_float = float(amount)
    if math.isfinite(as_float) and Decimal(repr(as_float)) == amount:
        return as_float
    return str(amount)


def transaction_to_dict(txn: domain.Transaction) -> dict[str, Any]:
    """Convert a Transaction entity to its JSON representation."""
    data: dict[str, Any] = {"id": txn.id}
    if txn.parent_id is not None:
        data["parentId"] = txn.parent_id
    data.update(
        {
            "amount": _to_number(txn.amount),
            "description": txn.description,
            "date": txn.date,
            "category": txn.category,
            "transactionType": txn.transaction_type,
            "isSplit": txn.is_split,
        }
    )
    return data


def transaction_from_dict(data: dict[str, Any]) -> domain.Transaction:
    """Convert a stored transaction object to a Transaction entity."""
    parent_id = data.get("parentId")
    return domain.Transaction(
        id=int(data.get("id", 0)),
        parent_id=int(parent_id) if parent_id is not None else None,
        amount=_to_decimal(data.get("amount", 0)),
        description=str(data.get("description", "")),
        date=str(data.get("date", "")),
        category=str(data.get("category", "")),
        transaction_type=str(data.get("transactionType", "")),
        is_split=bool(data.get("isSplit", False)),
    )


def backup_transaction_from_dict(data: dict[str, Any]) -> domain.Transaction:
    """Convert a flat backup record to a Transaction entity without an ID.

    ``paymentMethod`` is accepted but discarded.
    """
    return domain.Transaction(
        amount=_to_decimal(data.get("amount", 0)),
        description=str(data.get("description", "")),
        date=str(data.get("date", "")),
        category=str(data.get("category", "")),
        transaction_type=str(data.get("transactionType", "")),
    )


def template_to_dict(template: domain.CSVTemplate) -> dict[str, Any]:
    """Convert a CSVTemplate entity to its JSON representation."""
    return {
        "name": template.name,
        "dateColumn": template.date_column,
        "amountColumn": template.amount_column,
        "descColumn": template.desc_column,
        "hasHeader": template.has_header,
    }


def template_from_dict(data: dict[str, Any]) -> domain.CSVTemplate:
    """Convert a stored template object to a CSVTemplate entity."""
    return domain.CSVTemplate(
        name=str(data["name"]),
        date_column=int(data.get("dateColumn", 0)),
        amount_column=int(data.get("amountColumn", 0)),
        desc_column=int(data.get("descColumn", 0)),
        has_header=bool(data.get("hasHeader", False)),
    )


def category_to_dict(category: domain.Category) -> dict[str, Any]:
    """Convert a Category entity to its JSON representation."""
    return {"name": category.name, "displayName": category.display_name}


def category_from_dict(data: dict[str, Any]) -> domain.Category:
    """Convert a stored category object to a Category entity."""
    return domain.Category(
        name=str(data["name"]),
        display_name=str(data.get("displayName", "")),
    )


def statement_to_dict(statement: domain.BankStatement) -> dict[str, Any]:
    """Convert a BankStatement entity to its JSON representation."""
    return {
        "id": statement.id,
        "filename": statement.filename,
        "importDate": statement.import_date,
        "periodStart": statement.period_start,
        "periodEnd": statement.period_end,
        "templateUsed": statement.template_used,
        "txCount": statement.tx_count,
        "status": statement.status,
    }


def statement_from_dict(data: dict[str, Any]) -> domain.BankStatement:
    """Convert a stored statement object to a BankStatement entity."""
    return domain.BankStatement(
        id=int(data["id"]),
        filename=str(data.get("filename", "")),
        import_date=str(data.get("importDate", "")),
        period_start=str(data.get("periodStart", "")),
        period_end=str(data.get("periodEnd", "")),
        template_used=str(data.get("templateUsed", "")),
        tx_count=int(data.get("txCount", 0)),
        status=str(data.get("status", "")),
    )
