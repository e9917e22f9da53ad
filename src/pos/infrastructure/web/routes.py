"""REST routes of the HTTP gateway.

Each view parses its input, calls exactly one application handler and
serializes the DTO it gets back.  Errors are left to propagate to the
handlers registered in ``pos.infrastructure.web.app``.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from pos.application.add_product import AddProductHandler
from pos.application.create_invoice import CreateInvoiceHandler
from pos.application.dto import LineItemSpec
from pos.application.list_products import ListProductsHandler
from pos.application.remove_product import RemoveProductHandler
from pos.application.show_report import DailyReportHandler, MonthlyReportHandler
from pos.application.update_product import UpdateProductHandler
from pos.domain.exceptions import ValidationError
from pos.domain.repository.document_repository import DocumentRepository
from pos.infrastructure.web.serializers import (
    daily_report_payload,
    invoice_payload,
    monthly_report_payload,
    product_payload,
)

api = Blueprint("api", __name__, url_prefix="/api")


def _repo() -> DocumentRepository:
    return current_app.config["DOCUMENT_REPOSITORY"]


def _json_body() -> dict:
    """Parsed request body; an empty body counts as ``{}``."""
    if not request.get_data(cache=True):
        return {}
    body = request.get_json(force=True, silent=True)
    if body is None:
        raise ValidationError("invalid json")
    if not isinstance(body, dict):
        raise ValidationError("request body must be a JSON object")
    return body


def _line_item_specs(raw_items: object) -> list[LineItemSpec]:
    if not isinstance(raw_items, list) or not raw_items:
        raise ValidationError("items required")
    specs = []
    for index, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            raise ValidationError(f"items[{index}] must be an object")
        specs.append(
            LineItemSpec(
                product_id=raw.get("productId"),
                product_name=raw.get("productName"),
                quantity=raw.get("quantity"),
                price=raw.get("price"),
                image_url=raw.get("imageUrl", ""),
            )
        )
    return specs


@api.get("/health")
def health():
    return jsonify({"ok": True})


# -------- Products --------
@api.get("/products")
def products_list():
    products = ListProductsHandler(_repo()).handle()
    return jsonify([product_payload(p) for p in products])


@api.post("/products")
def products_create():
    body = _json_body()
    product = AddProductHandler(_repo()).handle(
        name=body.get("name"),
        image_url=body.get("imageUrl"),
    )
    return jsonify(product_payload(product)), 201


@api.put("/products/<product_id>")
def products_update(product_id: str):
    body = _json_body()
    product = UpdateProductHandler(_repo()).handle(
        product_id,
        name=body.get("name"),
        image_url=body.get("imageUrl"),
    )
    return jsonify(product_payload(product))


@api.delete("/products/<product_id>")
def products_delete(product_id: str):
    RemoveProductHandler(_repo()).handle(product_id)
    return jsonify({"ok": True})


# -------- Invoices --------
@api.post("/invoices")
def invoices_create():
    specs = _line_item_specs(_json_body().get("items"))
    invoice = CreateInvoiceHandler(_repo()).handle(specs)
    return jsonify(invoice_payload(invoice)), 201


# -------- Reports --------
@api.get("/reports/daily")
def reports_daily():
    report = DailyReportHandler(_repo()).handle(request.args.get("date"))
    return jsonify(daily_report_payload(report))


@api.get("/reports/monthly")
def reports_monthly():
    report = MonthlyReportHandler(_repo()).handle(
        request.args.get("year"),
        request.args.get("month"),
    )
    return jsonify(monthly_report_payload(report))
