"""Identifier generation for products and invoices.

Ids combine the current epoch milliseconds with a short random base36
suffix, which is unique enough for a single shop process.
"""

from __future__ import annotations

import random
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 7


def _suffix() -> str:
    return "".join(random.choices(_ALPHABET, k=_SUFFIX_LENGTH))


def new_invoice_id() -> str:
    return f"INV-{int(time.time() * 1000)}-{_suffix()}"


def new_product_id() -> str:
    return f"{int(time.time() * 1000)}{_suffix()}"
