"""CSV parsing and validation for bulk food item imports."""

import io
import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import replace

import pandas as pd

from metabolikal.domain.food_items import (
    CSV_HEADERS,
    CSVParseResult,
    CSVValidationError,
    FoodItemInsert,
    RawCSVRow,
    ValidatedCSVRow,
)

MAX_NAME_LENGTH = 100
MAX_SERVING_SIZE_LENGTH = 50
MAX_QUANTITY_LENGTH = 50
MAX_CALORIES = 5000
MAX_MACRO_GRAMS = 500
# Data rows are 1-indexed and follow the header line.
FIRST_DATA_ROW_NUMBER = 2
EMPTY_CONTENT_ERROR = "No header row found"

_TRUE_VALUES = {"true", "yes", "1"}
_NUMBER_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)
_WHITESPACE = re.compile(r"\s+")

_TEMPLATE_ROWS = (
    '"Grilled Chicken Breast",165,31,0,3.6,"100g",false,"130g raw","100g cooked","lunch|dinner"',  # noqa: E501
    '"Brown Rice",216,5,45,1.8,"1 cup cooked",true,"80g dry","240g cooked","lunch|dinner"',  # noqa: E501
    '"Greek Yogurt",100,17,6,0.7,"170g",true,,,"breakfast|snack"',
    '"Banana",105,1.3,27,0.4,"1 medium",true,,,"breakfast|snack|pre-workout"',
)

_logger = logging.getLogger(__name__)


def generate_csv_template() -> str:
    """Return the downloadable CSV template with example rows."""
    return "\n".join([",".join(CSV_HEADERS), *_TEMPLATE_ROWS])


def validate_csv_row(row: RawCSVRow, row_number: int) -> ValidatedCSVRow:
    """Validate a single CSV row, collecting every field error."""
    errors: list[CSVValidationError] = []

    name = row.get("name")
    if not name or name.strip() == "":
        errors.append(CSVValidationError("name", "Name is required"))
    elif len(name) > MAX_NAME_LENGTH:
        errors.append(
            CSVValidationError("name", "Name must be 100 characters or less")
        )

    calories = _parse_number(row.get("calories"))
    if calories is None:
        errors.append(
            CSVValidationError(
                "calories", "Calories is required and must be a number"
            )
        )
    elif not 0 <= calories <= MAX_CALORIES:
        errors.append(
            CSVValidationError("calories", "Calories must be between 0 and 5000")
        )

    protein = _parse_number(row.get("protein"))
    if protein is None:
        errors.append(
            CSVValidationError("protein", "Protein is required and must be a number")
        )
    elif not 0 <= protein <= MAX_MACRO_GRAMS:
        errors.append(
            CSVValidationError("protein", "Protein must be between 0 and 500g")
        )

    carbs = _parse_number(row.get("carbs"))
    if carbs is not None and not 0 <= carbs <= MAX_MACRO_GRAMS:
        errors.append(CSVValidationError("carbs", "Carbs must be between 0 and 500g"))

    fats = _parse_number(row.get("fats"))
    if fats is not None and not 0 <= fats <= MAX_MACRO_GRAMS:
        errors.append(CSVValidationError("fats", "Fats must be between 0 and 500g"))

    serving_size = row.get("serving_size")
    if not serving_size or serving_size.strip() == "":
        errors.append(CSVValidationError("serving_size", "Serving size is required"))
    elif len(serving_size) > MAX_SERVING_SIZE_LENGTH:
        errors.append(
            CSVValidationError(
                "serving_size", "Serving size must be 50 characters or less"
            )
        )

    raw_quantity = row.get("raw_quantity")
    if raw_quantity and len(raw_quantity) > MAX_QUANTITY_LENGTH:
        errors.append(
            CSVValidationError(
                "raw_quantity", "Raw quantity must be 50 characters or less"
            )
        )

    cooked_quantity = row.get("cooked_quantity")
    if cooked_quantity and len(cooked_quantity) > MAX_QUANTITY_LENGTH:
        errors.append(
            CSVValidationError(
                "cooked_quantity", "Cooked quantity must be 50 characters or less"
            )
        )

    if errors:
        return ValidatedCSVRow(
            row_number=row_number, data=row, errors=errors, is_valid=False
        )

    transformed = FoodItemInsert(
        name=name.strip(),
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        serving_size=serving_size.strip(),
        is_vegetarian=_parse_boolean(row.get("is_vegetarian")),
        raw_quantity=(raw_quantity or "").strip() or None,
        cooked_quantity=(cooked_quantity or "").strip() or None,
        meal_types=_parse_meal_types(row.get("meal_types")),
    )
    return ValidatedCSVRow(
        row_number=row_number,
        data=row,
        errors=errors,
        is_valid=True,
        transformed_data=transformed,
    )


def check_duplicates(
    rows: list[ValidatedCSVRow], existing_names: Iterable[str]
) -> list[ValidatedCSVRow]:
    """Flag repeated names within the batch and names already stored."""
    existing = {name.lower() for name in existing_names}
    first_seen: dict[str, int] = {}
    for row in rows:
        key = _name_key(row)
        if key and key not in first_seen:
            first_seen[key] = row.row_number

    checked = []
    for row in rows:
        key = _name_key(row)
        if not key:
            checked.append(row)
            continue

        errors = list(row.errors)
        first_row_number = first_seen[key]
        if first_row_number != row.row_number:
            errors.append(
                CSVValidationError(
                    "name",
                    f"Duplicate name found in CSV (also in row {first_row_number})",
                )
            )
        if key in existing:
            errors.append(
                CSVValidationError(
                    "name",
                    "A food item with this name already exists in the database",
                )
            )

        is_valid = not errors
        checked.append(
            replace(
                row,
                errors=errors,
                is_valid=is_valid,
                transformed_data=row.transformed_data if is_valid else None,
            )
        )
    return checked


def parse_csv(content: str, existing_names: Iterable[str] = ()) -> CSVParseResult:
    """Parse CSV text into validated food item rows."""
    parse_errors: list[str] = []
    raw_rows = _read_rows(content, parse_errors)

    validated = [
        validate_csv_row(row, index + FIRST_DATA_ROW_NUMBER)
        for index, row in enumerate(raw_rows)
    ]
    validated = check_duplicates(validated, existing_names)

    valid_rows = sum(1 for row in validated if row.is_valid)
    _logger.debug(
        "Parsed food item CSV: rows=%s valid=%s parse_errors=%s",
        len(validated),
        valid_rows,
        len(parse_errors),
    )
    return CSVParseResult(
        rows=validated,
        total_rows=len(validated),
        valid_rows=valid_rows,
        invalid_rows=len(validated) - valid_rows,
        parse_errors=parse_errors,
    )


def is_parse_failure(result: CSVParseResult) -> bool:
    """Return True when the tokenizer failed without producing any rows."""
    return bool(result.parse_errors) and not result.rows


def get_valid_food_items(result: CSVParseResult) -> list[FoodItemInsert]:
    """Return the transformed records of valid rows in file order."""
    return [
        row.transformed_data
        for row in result.rows
        if row.is_valid and row.transformed_data is not None
    ]


def _read_rows(content: str, parse_errors: list[str]) -> list[RawCSVRow]:
    """Tokenize CSV text into raw rows keyed by normalized header.

    Rows with more or fewer fields than the header are kept and reported in
    ``parse_errors``. Extra fields are dropped and missing ones read as None.
    """
    try:
        records = _read_records(content)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        parse_errors.append(str(exc))
        return []

    malformed = _find_malformed_record(content, width=_record_width(records))
    if malformed is not None:
        # The tokenizer drops the record it failed on and anything it swallowed.
        parse_errors.append(f"Row {len(records) + 1}: {malformed}")
    elif not records:
        parse_errors.append(EMPTY_CONTENT_ERROR)
    if not records:
        return []

    header, *data = records
    columns = [_normalize_header(column) for column in header]
    known_headers = [column for column in CSV_HEADERS if column in columns]
    rows: list[RawCSVRow] = []
    for index, fields in enumerate(data):
        row_number = index + FIRST_DATA_ROW_NUMBER
        if len(fields) != len(columns):
            problem = "Too many" if len(fields) > len(columns) else "Too few"
            parse_errors.append(
                f"Row {row_number}: {problem} fields: expected {len(columns)} "
                f"fields but parsed {len(fields)}"
            )
        values: dict[str, str] = {}
        for column, value in zip(columns, fields):
            values.setdefault(column, value)
        row: RawCSVRow = {}
        for column in known_headers:
            row[column] = values.get(column)
        rows.append(row)
    return rows


def _read_records(content: str) -> list[list[str]]:
    """Read every record, header included, as its list of fields.

    Records are read positionally into a frame at least as wide as the
    longest record, so pandas never infers an index column or truncates.
    Cells beyond a record's end come back as NaN.
    """
    width = max((line.count(",") + 1 for line in content.splitlines()), default=1)
    while True:
        overflow: list[list[str]] = []
        frame = _read_frame(content, width, on_bad_lines=overflow.append)
        if not overflow:
            break
        # Quoted line breaks can join lines into a record wider than any line.
        width *= 2
    return [
        [value for value in record if isinstance(value, str)]
        for record in frame.to_numpy().tolist()
    ]


def _find_malformed_record(content: str, width: int) -> str | None:
    """Return the tokenizer error that the lenient read skips over, if any."""
    try:
        _read_frame(content, width, on_bad_lines="error")
    except pd.errors.ParserError as exc:
        return str(exc)
    return None


def _read_frame(
    content: str,
    width: int,
    on_bad_lines: str | Callable[[list[str]], list[str] | None],
) -> pd.DataFrame:
    return pd.read_csv(
        io.StringIO(content),
        header=None,
        names=list(range(width)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=on_bad_lines,
    )


def _record_width(records: list[list[str]]) -> int:
    return max((len(record) for record in records), default=1)


def _normalize_header(header: str) -> str:
    return _WHITESPACE.sub("_", header.strip().lower())


def _name_key(row: ValidatedCSVRow) -> str:
    return (row.data.get("name") or "").lower().strip()


def _parse_number(value: str | None) -> float | None:
    """Parse the leading numeric part of a cell, None when there is none."""
    if not value or value.strip() == "":
        return None
    match = _NUMBER_PREFIX.match(value)
    if match is None:
        return None
    return float(match.group(1))


def _parse_boolean(value: str | None) -> bool:
    if not value:
        return False
    return value.strip().lower() in _TRUE_VALUES


def _parse_meal_types(value: str | None) -> list[str] | None:
    if not value or value.strip() == "":
        return None
    return [
        meal_type.strip().lower()
        for meal_type in value.split("|")
        if meal_type.strip()
    ]
