# catalog/accounts_service/main.py
import copy

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.utils.numbers import is_number
from catalog.utils.settings import ACCOUNTS_MOCK_PORT
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Accounts Service (dev mock)")


SEED_ACCOUNTS = {
    "acc_123": {"id": "acc_123", "name": "Test User", "balance": 200},
    "acc_456": {"id": "acc_456", "name": "Premium User", "balance": 500},
    "acc_789": {"id": "acc_789", "name": "Low Balance User", "balance": 10},
    "acc_demo": {"id": "acc_demo", "name": "Demo Account", "balance": 1000},
}

ACCOUNTS = copy.deepcopy(SEED_ACCOUNTS)


def reset_accounts():
    ACCOUNTS.clear()
    ACCOUNTS.update(copy.deepcopy(SEED_ACCOUNTS))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.get("/health")
def health():
    return {"status": "ok", "service": "accounts-api-mock"}


@app.get("/accounts/{account_id}")
def get_account(account_id: str):
    account = ACCOUNTS.get(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="account not found")
    return {"account": account}


@app.post("/accounts/{account_id}/credit")
async def credit_account(account_id: str, request: Request):
    """Applies a signed delta; a debit may not take the balance below zero."""
    account = ACCOUNTS.get(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="account not found")

    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid JSON body")

    amount = body.get("amount") if isinstance(body, dict) else None
    if not is_number(amount):
        raise HTTPException(status_code=400, detail="amount must be a number")

    new_balance = account["balance"] + amount
    if amount < 0 and new_balance < 0:
        raise HTTPException(status_code=400, detail="insufficient balance")

    account["balance"] = new_balance
    logger.info(f"Account {account_id} balance {new_balance}")
    return {"balance": new_balance, "currency": "USD"}


# registered last: catches every path and method no route above handles
@app.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
def fallback(path: str, request: Request):
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return JSONResponse(
        status_code=404,
        content={"error": "Mock route not defined", "method": request.method, "url": url},
    )


def run():
    logger.info(f"accounts-api-mock listening on port {ACCOUNTS_MOCK_PORT}")
    uvicorn.run(app, host="0.0.0.0", port=ACCOUNTS_MOCK_PORT)


if __name__ == "__main__":
    run()
