# catalog/services/accounts_client.py
from urllib.parse import quote

import requests
from requests import RequestException

from catalog.domain.errors import CollaboratorError, InternalError
from catalog.utils.settings import ACCOUNTS_BASE_URL, ACCOUNTS_TIMEOUT_SECONDS
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class AccountsClient:
    """
    Client of the accounts service: account lookup and signed credit/debit.
    Calls are made once, there is no retry.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = ACCOUNTS_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or ACCOUNTS_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_account(self, account_id: str) -> dict:
        url = f"{self.base_url}/accounts/{quote(account_id, safe='')}"
        logger.info(f"AccountsClient GET {url}")

        data = self._request("GET", url)
        return data.get("account") or data

    def credit_account(self, account_id: str, amount: int | float) -> dict:
        """Negative amount debits the account."""
        url = f"{self.base_url}/accounts/{quote(account_id, safe='')}/credit"
        logger.info(f"AccountsClient POST {url} amount={amount}")

        return self._request("POST", url, json={"amount": amount})

    def _request(self, method: str, url: str, **kwargs) -> dict:
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            data = resp.json() if resp.text else {}
        except (RequestException, ValueError) as e:
            logger.warning(f"AccountsClient {method} {url} failed: {e}")
            raise InternalError(str(e)) from e

        if not resp.ok:
            message = (data.get("error") if isinstance(data, dict) else None) or resp.reason or "accounts service error"
            logger.warning(f"AccountsClient {method} {url} -> {resp.status_code}: {message}")
            raise CollaboratorError(resp.status_code, message)

        if not isinstance(data, dict):
            raise InternalError("unexpected response from accounts service")
        return data
