"""
mock_payment_service.py — Mock Implementation of the Payment Service (REST API)

This module provides a simulated Payment Service for local runs of the ticket service.
It exposes a simple FastAPI application that mimics real-world payment processing behavior.

Simulation Scenarios:
    • Successful payment processing
    • Declined payment (HTTP 402) for accounts listed in MOCK_DECLINED_ACCOUNTS
    • Invalid amount (HTTP 400)

Endpoints:
    POST /v1/payments — Handles incoming payment requests.

Port:
    Default: 8001 (HTTP)
"""

import logging
import os
import time
import uuid

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

app = FastAPI(title="Mock Payment Service")
logging.basicConfig(level=logging.INFO)

DECLINED_ACCOUNTS = {
    int(account) for account in os.environ.get("MOCK_DECLINED_ACCOUNTS", "402").split(",") if account.strip()
}


class PaymentRequest(BaseModel):
    """
    Represents a payment request payload.

    Attributes:
        accountId (int): The account to charge.
        amount (int): Amount in whole currency units.
    """
    accountId: int
    amount: int


@app.post("/v1/payments")
def make_payment(request: PaymentRequest):
    """
    Processes a payment request.

    Returns:
        dict: Payment transaction result on success, including:
            - transactionId (str): Unique transaction identifier.
            - status (str): Always "succeeded" for successful payments.
            - createdAt (str): UTC timestamp of the transaction.

    Raises:
        HTTPException(400): If the amount is negative.
        HTTPException(402): If the account is configured to be declined.
    """
    logging.info(f"[PS] Payment request of {request.amount} for account {request.accountId}")

    if request.amount < 0:
        raise HTTPException(
            status_code=400,
            detail={"errorCode": "invalid_amount", "message": "Amount must not be negative."}
        )

    if request.accountId in DECLINED_ACCOUNTS:
        logging.warning(f"[PS] Payment for account {request.accountId} declined.")
        raise HTTPException(
            status_code=402,
            detail={"errorCode": "payment_declined", "message": "Payment declined."}
        )

    logging.info(f"[PS] Payment for account {request.accountId} succeeded.")
    return {
        "transactionId": f"tr_{uuid.uuid4()}",
        "status": "succeeded",
        "createdAt": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
