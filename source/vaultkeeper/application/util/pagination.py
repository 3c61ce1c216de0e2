"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import Any, Callable, Dict, Iterator

from vaultkeeper.application.util.exceptions import remote_call

logger = logging.getLogger()


def paginate(
    operation: Callable[..., Any],
    items_key: str,
    token_key: str,
    token_param: str,
    **params: Any,
) -> Iterator[Any]:
    """
    Lazily walks a marker based listing call.

    One request is issued per page and every item of a page is yielded before
    the next page is requested. Iteration stops once a response carries no
    continuation token.

    :param operation: The bound client method, e.g. ``glacier.list_vaults``.
    :param items_key: Response key holding the page's items (``VaultList``).
    :param token_key: Response key holding the continuation token (``Marker``).
    :param token_param: Request parameter the token is passed back in (``marker``).
    :param params: Remaining request parameters, forwarded on every call.
    """
    name = getattr(operation, "__name__", items_key)
    request: Dict[str, Any] = {k: v for k, v in params.items() if v is not None}
    page = 0
    while True:
        page += 1
        with remote_call(name):
            response = operation(**request)
        items = response.get(items_key) or []
        logger.debug(f"{name} page {page} returned {len(items)} items")
        yield from items

        token = response.get(token_key)
        if not token:
            return
        request[token_param] = token
