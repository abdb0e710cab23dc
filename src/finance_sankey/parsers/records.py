from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Mapping

from finance_sankey.domain.errors import InvalidRecord
from finance_sankey.domain.models import FinancialRecord


def parse_amount(value: Any) -> Decimal:
    """
    Convert a report cell to a Decimal.

    Accepts numbers and strings such as '$1,250.00' or '-3,400'.
    Floats go through str() so 0.1 stays 0.1.

    Raises:
        ValueError: If the value is empty or not numeric
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"not a finite number: {value!r}")
        return value

    text = str(value).strip().replace("$", "").replace(",", "")
    if not text:
        raise ValueError("amount is blank")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"not a number: {value!r}")

    if not amount.is_finite():
        raise ValueError(f"not a finite number: {value!r}")

    return amount


def records_from_mappings(
    entries: Iterable[Mapping[str, Any]],
    fiscal_year: str,
    name_field: str = "name",
    category_field: str = "type",
) -> List[FinancialRecord]:
    """
    Turn a generic sequence of key-value entries into FinancialRecords.

    Only the configured fiscal-year key is read for the amount; other year
    columns in the entry are ignored.

    Args:
        entries: Entries in report order, e.g. `{"name": "Tuition", "2023": 100, "type": "Operating Revenue"}`
        fiscal_year: Key holding the amount (e.g. '2023')
        name_field: Key holding the line item name
        category_field: Key holding the category

    Returns:
        Records in the same order as the entries

    Raises:
        InvalidRecord: If an entry is not a mapping, lacks a field,
            or has a non-numeric amount
    """
    records = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise InvalidRecord(index, None, f"expected a mapping, got {type(entry).__name__}")

        for field_name in (name_field, fiscal_year, category_field):
            if field_name not in entry:
                raise InvalidRecord(index, entry, f"missing field '{field_name}'")

        name = entry[name_field]
        category = entry[category_field]
        if name is None or not str(name).strip():
            raise InvalidRecord(index, entry, f"blank '{name_field}'")
        if category is None or not str(category).strip():
            raise InvalidRecord(index, entry, f"blank '{category_field}'")

        try:
            amount = parse_amount(entry[fiscal_year])
        except ValueError as e:
            raise InvalidRecord(index, entry, f"bad '{fiscal_year}' amount: {e}")

        records.append(FinancialRecord(
            name=str(name).strip(),
            amount=amount,
            category=str(category).strip(),
        ))

    return records
