"""Account decoding CLI commands."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, NoReturn

import typer

from pythaccounts.core.codec.encoding import ENCODINGS
from pythaccounts.core.decoders import (
    parse_account,
    parse_header,
    parse_mapping_data,
    parse_price_data,
    parse_product_data,
)
from pythaccounts.core.exceptions.decode import DecodeError
from pythaccounts.core.models import AccountRecord, MappingRecord, PriceInfo, PriceRecord, ProductRecord

from .constants import DECODE_ERROR_EXIT_CODE, VALIDATION_EXIT_CODE
from .utils import emit_error, get_cli_options, prepare_output, read_account_file

HEADER_COLUMNS = ["magic", "version", "account_type", "account_type_code", "size", "length"]
MAPPING_COLUMNS = ["index", "product_account"]
PRODUCT_COLUMNS = ["key", "value"]
PRICE_COLUMNS = [
    "source",
    "price",
    "confidence",
    "status",
    "publish_slot",
    "latest_price",
    "latest_confidence",
    "latest_status",
    "latest_publish_slot",
]

_PARSERS = {
    "auto": parse_account,
    "mapping": parse_mapping_data,
    "product": parse_product_data,
    "price": parse_price_data,
}


def register(app: typer.Typer) -> None:
    """Register decoding commands on the root CLI application."""

    app.command("header")(header_command)
    app.command("decode")(decode_command)


def header_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File holding account data."),
    encoding: str = typer.Option("raw", "--encoding", "-e", help=f"Input encoding ({', '.join(ENCODINGS)})."),
) -> None:
    """Print the common account header without decoding the body."""

    data = _load(path, encoding)
    try:
        header = parse_header(data)
    except DecodeError as error:
        _fail(error)

    rows = [
        {
            "magic": f"0x{header.magic:08x}",
            "version": header.version,
            "account_type": header.type.display_name,
            "account_type_code": header.account_type,
            "size": header.size,
            "length": len(data),
        }
    ]
    _render(ctx, rows, HEADER_COLUMNS)


def decode_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File holding account data."),
    encoding: str = typer.Option("raw", "--encoding", "-e", help=f"Input encoding ({', '.join(ENCODINGS)})."),
    account_type: str = typer.Option(
        "auto",
        "--type",
        "-t",
        help="Account layout (auto, mapping, product, price).",
    ),
    no_validate: bool = typer.Option(
        False,
        "--no-validate",
        help="Skip magic, version and type checks on the header.",
    ),
) -> None:
    """Decode an account and print its entries."""

    parser = _PARSERS.get(account_type.strip().lower())
    if parser is None:
        emit_error(f"Unsupported account type '{account_type}'", "INVALID_ACCOUNT_TYPE")
        raise typer.Exit(code=VALIDATION_EXIT_CODE)

    config = get_cli_options(ctx).decoder
    if no_validate:
        config = replace(config, validate_header=False)

    data = _load(path, encoding)
    try:
        record = parser(data, config)
    except DecodeError as error:
        _fail(error)

    rows, columns = record_rows(record)
    _render(ctx, rows, columns)


def record_rows(record: AccountRecord) -> tuple[list[dict[str, Any]], list[str]]:
    """Flatten a decoded record into table rows."""

    if isinstance(record, MappingRecord):
        rows = [
            {"index": index, "product_account": str(key)}
            for index, key in enumerate(record.product_account_keys)
        ]
        return rows, MAPPING_COLUMNS
    if isinstance(record, ProductRecord):
        return [{"key": key, "value": value} for key, value in record.metadata.items()], PRODUCT_COLUMNS
    if isinstance(record, PriceRecord):
        rows = [_price_row("aggregate", record.aggregate, None)]
        rows.extend(
            _price_row(str(component.publisher), component.aggregate, component.latest)
            for component in record.price_components
        )
        return rows, PRICE_COLUMNS
    raise TypeError(f"Unsupported record type {type(record).__name__}")


def _price_row(source: str, aggregate: PriceInfo, latest: PriceInfo | None) -> dict[str, Any]:
    return {
        "source": source,
        "price": aggregate.price,
        "confidence": aggregate.confidence,
        "status": aggregate.status.display_name,
        "publish_slot": aggregate.publish_slot,
        "latest_price": latest.price if latest else None,
        "latest_confidence": latest.confidence if latest else None,
        "latest_status": latest.status.display_name if latest else None,
        "latest_publish_slot": latest.publish_slot if latest else None,
    }


def _load(path: Path, encoding: str) -> bytes:
    try:
        return read_account_file(path, encoding)
    except DecodeError as error:
        emit_error(error.message, error.error_code, details=error.to_payload())
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error


def _fail(error: DecodeError) -> NoReturn:
    emit_error(error.message, error.error_code, details=error.to_payload())
    raise typer.Exit(code=DECODE_ERROR_EXIT_CODE) from error


def _render(ctx: typer.Context, rows: list[dict[str, Any]], columns: list[str]) -> None:
    formatter, stream, stack, _ = prepare_output(ctx)
    try:
        formatter.render(rows, stream=stream, columns=columns)
    finally:
        stack.close()


__all__ = ["register", "record_rows"]
