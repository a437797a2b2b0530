"""Extração dos campos relevantes das respostas da Pagar.me.

Transforma o JSON upstream no resultado exposto ao chamador. Campos
ausentes no upstream simplesmente não aparecem no resultado.
"""

from __future__ import annotations

from typing import Any

from app.protocols.gateway_client import GatewayError


def _last_transaction(order: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    charges = order.get("charges")
    if not isinstance(charges, list) or not charges or not isinstance(charges[0], dict):
        return {}, {}
    charge = charges[0]
    transaction = charge.get("last_transaction")
    return charge, transaction if isinstance(transaction, dict) else {}


def map_order_response(order: dict[str, Any]) -> dict[str, Any]:
    """Resultado de POST /orders conforme o tipo da última transação.

    - pix: pix_qr_code, pix_qr_code_url
    - boleto: boleto_url, boleto_barcode, boleto_pdf
    - cartões: transaction_id, status (da cobrança)
    """
    result: dict[str, Any] = {"success": True, "order": order}
    charge, transaction = _last_transaction(order)
    transaction_type = transaction.get("transaction_type")

    if transaction_type == "pix":
        fields = {
            "pix_qr_code": transaction.get("qr_code"),
            "pix_qr_code_url": transaction.get("qr_code_url"),
        }
    elif transaction_type == "boleto":
        fields = {
            "boleto_url": transaction.get("url"),
            "boleto_barcode": transaction.get("barcode"),
            "boleto_pdf": transaction.get("pdf"),
        }
    elif transaction_type in ("credit_card", "debit_card"):
        fields = {
            "transaction_id": transaction.get("id"),
            "status": charge.get("status"),
        }
    else:
        fields = {}

    result.update({key: value for key, value in fields.items() if value is not None})
    return result


def map_payment_link_response(link: dict[str, Any]) -> dict[str, Any]:
    """Resultado de POST /paymentlinks (url vira checkout_url)."""
    result: dict[str, Any] = {"success": True, "payment_link": link}
    if link.get("url"):
        result["checkout_url"] = link["url"]
    if link.get("id") is not None:
        result["link_id"] = link["id"]
    if link.get("short_url"):
        result["short_url"] = link["short_url"]
    return result


def extract_checkout_url(link: dict[str, Any]) -> str:
    """URL do checkout legado.

    Raises:
        GatewayError: Resposta sem url
    """
    url = link.get("url")
    if not url:
        raise GatewayError(
            f"checkout url ausente na resposta da Pagar.me: {link}",
            body=str(link),
        )
    return str(url)
